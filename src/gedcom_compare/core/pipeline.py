from __future__ import annotations

from pathlib import Path

from gedcom_compare.core.context import CompareContext
from gedcom_compare.core.exceptions import CompareExecutionError, NoIndividualsFoundError
from gedcom_compare.exporter import export_report_json, build_summary
from gedcom_compare.loader import load_file
from gedcom_compare.records import RecordSet, parse_records
from gedcom_compare.session import ComparisonSession, SessionStore, create_session


def load_record_set(path: str | Path) -> RecordSet:
    """Read and parse one GEDCOM file; an empty result is an error here."""
    path = Path(path)
    record_set = parse_records(load_file(path), path.name)
    if not record_set.records:
        raise NoIndividualsFoundError(path.name)
    return record_set


class Pipeline:
    """
    Orchestrates load -> parse -> auto-match -> save/export.
    No matching logic lives here.
    """

    def __init__(self, context: CompareContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> ComparisonSession:
        self.log.info("Pipeline starting")

        try:
            left = load_record_set(self.ctx.left_path)
            right = load_record_set(self.ctx.right_path)

            session = create_session(left, right)
            self.ctx.stats.update(build_summary(session))

            if self.ctx.save:
                store_path = self.ctx.store_path or self.ctx.config.resolve_path("sessions_file")
                SessionStore(store_path).save(session)

            if self.ctx.output_path:
                export_report_json(
                    session,
                    self.ctx.output_path,
                    indent=2 if self.ctx.pretty else None,
                )

            self.log.info("Pipeline completed successfully")
            return session

        except (NoIndividualsFoundError, FileNotFoundError):
            raise
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise CompareExecutionError(str(exc)) from exc
