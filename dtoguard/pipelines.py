"""Walk -> parse -> classify -> inspect -> collect, for one source tree."""

from pathlib import Path

from dtoguard.ast_parser import GoSourceParser, SourceParser
from dtoguard.indexer import AnalysisError, SourceWalker, read_source
from dtoguard.pipeline.structures import RunReport, ViolationCollector
from dtoguard.rules.base import RuleConfig, SourceFile
from dtoguard.rules.go.sanitize_analyze import analyze, should_check_record
from dtoguard.utils.logging import logger


def _scan(
    root: Path,
    config: RuleConfig,
    parser: SourceParser,
    collector: ViolationCollector,
    report: RunReport,
) -> None:
    files = SourceWalker(root, extension=config.extension).walk()

    for path in files:
        source = SourceFile(path=path, text=read_source(path))
        source.records = parser.parse(source.text, path)

        report.records_checked += sum(
            1 for record in source.records if should_check_record(record.name, config)
        )
        collector.extend(analyze(source.records, config))
        report.files_scanned += 1


def run_sanitize_check(
    root: str | Path,
    config: RuleConfig | None = None,
    parser: SourceParser | None = None,
) -> RunReport:
    """Check every source file under ``root``.

    Fatal errors (unreadable directory, unparsable file) stop the run and
    are returned on the report instead of any violations.
    """
    root = Path(root)
    config = config or RuleConfig()
    parser = parser or GoSourceParser()

    report = RunReport(root=root, marker=config.marker)
    collector = ViolationCollector()

    try:
        _scan(root, config, parser, collector, report)
    except AnalysisError as e:
        logger.debug("Run aborted: {err}", err=e)
        report.fatal_error = e
        return report

    report.violations = collector.violations
    logger.debug(
        "Checked {records} records in {files} files: {count} violations",
        records=report.records_checked,
        files=report.files_scanned,
        count=len(report.violations),
    )
    return report
