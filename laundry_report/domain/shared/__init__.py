"""
Utilidades compartidas del dominio.

Estas funciones son usadas por el ReportParser y por los layout mappers
y no dependen de ninguna librería externa. Solo operan sobre tipos
nativos de Python.

Uso:
    from laundry_report.domain.shared.money import parse_currency, format_brl
    from laundry_report.domain.shared.date_parser import parse_report_datetime
    from laundry_report.domain.shared.text_cleaner import normalize_lines, split_csv_line
    from laundry_report.domain.shared.cycle_classifier import classify_cycle
"""
