import io

import pdfplumber
import pytest

from reportforge.rendering.exceptions import SessionClosedError
from reportforge.rendering.process_engine import ProcessRenderEngine
from reportforge.rendering.session import RenderSession
from reportforge.report.assembler import DocumentAssembler
from reportforge.report.models import Page, ReportKind, SubmissionMeta, TextMetrics


class TestProcessRenderEngine:
    def test_renders_both_reports_in_worker(self, submission_meta: SubmissionMeta) -> None:
        assembler = DocumentAssembler(brand="reportforge", wrap_width=95)
        metrics = TextMetrics(word_count=4, char_count=19, page_estimate=1)
        pages = [Page(index=1, text="The quick brown fox", line_cost=1)]
        engine = ProcessRenderEngine(start_timeout_seconds=30, render_timeout_seconds=60)

        with RenderSession(engine) as session:
            assert engine.is_running
            outputs = [
                session.render(assembler.assemble(submission_meta, metrics, pages, kind, score=8))
                for kind in (ReportKind.SIMILARITY, ReportKind.AI)
            ]

        assert not engine.is_running
        for pdf_bytes in outputs:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                assert len(pdf.pages) == 3

    def test_render_after_stop_raises(self, submission_meta: SubmissionMeta) -> None:
        engine = ProcessRenderEngine(start_timeout_seconds=30, render_timeout_seconds=60)
        engine.start()
        engine.stop()

        model = DocumentAssembler(brand="reportforge", wrap_width=95).assemble(
            submission_meta,
            TextMetrics(word_count=0, char_count=0, page_estimate=0),
            [],
            ReportKind.AI,
            score=0,
        )
        with pytest.raises(SessionClosedError):
            engine.render(model)
