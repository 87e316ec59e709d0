from reportforge.pipeline.orchestrator import ReportPipeline, build_pipeline

__all__ = ["ReportPipeline", "build_pipeline"]
