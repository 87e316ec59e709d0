import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from reportforge.config.settings import Settings
from reportforge.database.connection import close_pool, init_pool
from reportforge.database.repositories.submission_repository import SubmissionRepository
from reportforge.extraction.media_types import guess_media_type
from reportforge.logging.logger import Log
from reportforge.pipeline.download import DownloadService
from reportforge.pipeline.exceptions import InvalidInputError, ProcessingError
from reportforge.pipeline.models import SubmissionUpload
from reportforge.pipeline.orchestrator import build_pipeline
from reportforge.report.models import ReportKind
from reportforge.storage.factory import ArtifactStoreFactory


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="reportforge")
    commands = parser.add_subparsers(dest="command", required=True)

    process = commands.add_parser("process", help="Generate both reports for a file")
    process.add_argument("path", type=Path)
    process.add_argument("--user-id", required=True)
    process.add_argument("--media-type", default=None)

    recent = commands.add_parser("list", help="List a user's submissions, newest first")
    recent.add_argument("--user-id", required=True)
    recent.add_argument("--limit", type=int, default=None)

    download = commands.add_parser("download", help="Save a stored report to a file")
    download.add_argument("reference")
    download.add_argument("--kind", choices=[k.value for k in ReportKind], required=True)
    download.add_argument("--output-dir", type=Path, default=Path("."))
    return parser


def _process(args: argparse.Namespace, settings: Settings) -> int:
    content = args.path.read_bytes()
    upload = SubmissionUpload(
        content=content,
        filename=args.path.name,
        media_type=args.media_type or guess_media_type(args.path.name) or "",
        size_bytes=len(content),
        user_id=args.user_id,
    )
    try:
        response = build_pipeline(settings).submit(upload)
    except InvalidInputError as exc:
        Log.error(f"Upload rejected: {exc}")
        return 2
    except ProcessingError as exc:
        Log.error(f"Processing error: {exc}")
        return 1
    print(json.dumps(asdict(response), indent=2))
    return 0


def _list(args: argparse.Namespace, settings: Settings) -> int:
    records = SubmissionRepository().list_by_user(
        args.user_id, limit=args.limit or settings.recent_submissions_limit
    )
    print(json.dumps([asdict(r) for r in records], indent=2, default=str))
    return 0


def _download(args: argparse.Namespace, settings: Settings) -> int:
    service = DownloadService(ArtifactStoreFactory.create(settings))
    payload = service.download(args.reference, ReportKind(args.kind))
    target = args.output_dir / payload.filename
    target.write_bytes(payload.content)
    Log.info(f"Saved {len(payload.content)} bytes to {target}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse command -> initialize pool -> run command."""
    args = _parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    if args.command == "download":
        return _download(args, settings)

    init_pool(settings)
    try:
        if args.command == "process":
            return _process(args, settings)
        return _list(args, settings)
    finally:
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
