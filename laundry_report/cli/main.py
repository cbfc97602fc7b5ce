"""
Punto de entrada CLI: laundry-report.

Uso:
    # Procesar un solo reporte
    laundry-report /ruta/vendas_marco.csv -o /ruta/salida

    # Procesar todos los reportes de una carpeta
    laundry-report /ruta/carpeta_csv -o /ruta/salida

    # Sin -o, genera el Excel en el mismo directorio del CSV
    laundry-report /ruta/vendas_marco.csv

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (CsvFileReader, ExcelWriter, etc.)
- Las inyecta en el ReportParser y el ReportProcessor.
- Ejecuta el procesamiento.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path

from laundry_report.adapters.input.layout_detectors.signature_detector import (
    SignatureLayoutDetector,
)
from laundry_report.adapters.input.readers.csv_file_reader import CsvFileReader
from laundry_report.adapters.output.loggers.console_logger import ConsoleLogger
from laundry_report.adapters.output.writers.excel_writer import ExcelWriter
from laundry_report.domain.exceptions import OutputError
from laundry_report.domain.models.scan_limits import ScanLimits
from laundry_report.domain.services.report_parser import ReportParser
from laundry_report.domain.services.report_processor import ReportProcessor
from laundry_report.infrastructure.registry import create_default_registry


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else None

    try:
        limits = ScanLimits(
            format_scan_lines=args.format_scan_lines,
            operator_scan_lines=args.operator_scan_lines,
        )
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(2)

    # --- Ensamblar componentes ---
    logger = ConsoleLogger(verbose=not args.quiet)
    registry = create_default_registry()

    parser = ReportParser(
        layout_detector=SignatureLayoutDetector(),
        mapper_registry=registry,
        logger=logger,
        limits=limits,
    )
    processor = ReportProcessor(readers=[CsvFileReader()], parser=parser, logger=logger)
    excel_writer = ExcelWriter()

    if not input_path.exists():
        print(f"❌ La ruta no existe: {input_path}")
        sys.exit(1)

    # --- Determinar directorio de salida ---
    if output_dir is None:
        output_dir = input_path.parent if input_path.is_file() else input_path
    output_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("LAUNDRY REPORT PARSER")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Salida:   {output_dir}")
    print(f"  Layouts disponibles: {', '.join(registry.available_layouts)}")
    print()

    try:
        if input_path.is_file():
            resultado = processor.process_file(input_path)
            if resultado is None:
                print("\n❌ No se pudo procesar el archivo.")
                sys.exit(1)
            logger.print_report_summary(input_path.name, resultado)
            output_file = output_dir / f"transacoes_{input_path.stem}.xlsx"
            logger.log_export_complete(
                excel_writer.write_single(resultado, output_file, source_name=input_path.name)
            )
        else:
            resultados = processor.process_directory(input_path)
            if not resultados:
                print("\n❌ No se procesó ningún archivo.")
                sys.exit(1)

            for ruta, resultado in resultados:
                logger.print_report_summary(ruta.name, resultado)
                output_file = output_dir / f"transacoes_{ruta.stem}.xlsx"
                logger.log_export_complete(
                    excel_writer.write_single(resultado, output_file, source_name=ruta.name)
                )

            if len(resultados) > 1:
                consolidado = [(ruta.name, resultado) for ruta, resultado in resultados]
                logger.log_export_complete(
                    excel_writer.write_consolidated(consolidado, output_dir / "consolidado.xlsx")
                )
    except OutputError as e:
        logger.log_error(input_path, e)
        logger.print_summary()
        sys.exit(1)

    # --- Resumen final ---
    logger.print_summary()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="laundry-report",
        description="Convierte reportes CSV de terminales de lavandería a Excel",
        epilog="Ejemplo: laundry-report /ruta/csv -o /ruta/salida",
    )

    parser.add_argument(
        "input_path",
        help="Ruta a un archivo CSV o a un directorio con CSVs",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida para los Excel generados. "
        "Si no se especifica, se usa el mismo directorio del CSV.",
    )

    parser.add_argument(
        "--format-scan-lines",
        dest="format_scan_lines",
        type=int,
        default=ScanLimits.format_scan_lines,
        help="Líneas revisadas al buscar el layout y el periodo (default: %(default)s)",
    )

    parser.add_argument(
        "--operator-scan-lines",
        dest="operator_scan_lines",
        type=int,
        default=ScanLimits.operator_scan_lines,
        help="Líneas revisadas al buscar 'Operador:' (default: %(default)s)",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Solo imprime avisos, errores y el resumen final",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
