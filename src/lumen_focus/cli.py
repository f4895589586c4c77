"""
Command Line Interface for Lumen Focus

Provides commands for classifying text, validating model artifacts and
managing the model catalog.
"""

import argparse
import sys

from .backends import BackendError
from .classifier import build_context
from .config import ConfigError, FocusSettings, ModelConfig
from .config_validator import load_and_validate_config
from .logger import setup_logging
from .manager import ModelLifecycleManager
from .resources import (
    AcquisitionTracker,
    LoadStatus,
    ModelFileValidator,
    ModelStore,
    PlaceholderFetcher,
    ResourceError,
    format_file_size,
    get_available_models,
    get_model,
    get_model_memory_requirement,
)


def print_banner():
    """Print welcome banner."""
    print("=" * 60)
    print("  Lumen Focus - Content Classifier")
    print("=" * 60)


def load_settings(args) -> FocusSettings:
    if getattr(args, "config", None):
        return load_and_validate_config(args.config)
    return FocusSettings()


def resolve_model_config(args, settings: FocusSettings) -> ModelConfig:
    """Pick the artifact: --model, then the config's model block, then the catalog default."""
    if args.model:
        model_path = args.model
    elif settings.model is not None:
        return settings.model
    else:
        store = ModelStore(settings.models_path)
        model_path = str(store.model_path(get_model(settings.default_model)))

    if settings.model is not None:
        return settings.model.model_copy(update={"model_path": model_path})
    return ModelConfig(model_path=model_path)


def print_result(result, as_json: bool):
    if as_json:
        print(result.to_json())
        return

    if not result.success:
        print(f"❌ Classification failed: {result.error}")
        return

    label = "PRODUCTIVE" if result.is_productive else "UNPRODUCTIVE"
    icon = "✅" if result.is_productive else "⛔"
    print(f"{icon} {label}")
    print(f"   Confidence: {result.confidence:.2f}")
    print(f"   Reason: {result.reason}")
    print(f"   Time: {result.processing_time_ms} ms")


def cmd_classify(args, settings: FocusSettings):
    """Handle classify command."""
    runtime = args.runtime or settings.runtime
    config = resolve_model_config(args, settings)

    with ModelLifecycleManager(
        runtime=runtime, result_cache_size=settings.result_cache_size
    ) as manager:
        if not manager.load(config):
            print(f"❌ Error: {manager.last_error}")
            sys.exit(1)

        context = None
        if not args.raw:
            context = build_context(args.text, app_package=args.app or "")

        result = manager.classify(args.text, context)
        print_result(result, args.json)

    if not result.success:
        sys.exit(1)


def cmd_validate(args, settings: FocusSettings):
    """Handle validate command."""
    validator = ModelFileValidator()
    report = validator.inspect(args.path)

    print(validator.describe(args.path))
    if not report.valid:
        print(f"❌ {report.message}")
        sys.exit(1)

    if args.checksum and not validator.verify_checksum(args.path, args.checksum):
        print("❌ Checksum mismatch")
        sys.exit(1)

    print("✅ Model file is valid")


def cmd_models(args, settings: FocusSettings):
    """Handle models command."""
    store = ModelStore(args.dir or settings.models_path)

    print_banner()
    print(f"\n📦 Available models (directory: {store.models_dir}):\n")

    for model in get_available_models():
        status = "✅" if store.is_downloaded(model) else "⬜"
        print(f"  {status} {model.id}")
        print(f"     {model.description}")
        print(f"     Size: {format_file_size(model.size_bytes)}")
        print(
            f"     Memory: {format_file_size(get_model_memory_requirement(model))}"
        )
        print()

    print(f"💾 Total on disk: {format_file_size(store.total_size())}")


def cmd_download(args, settings: FocusSettings):
    """Handle download command."""
    model = get_model(args.model_id)
    store = ModelStore(args.dir or settings.models_path)
    store.ensure_dir()
    target = store.model_path(model)

    print_banner()
    print(f"\n🚀 Downloading {model.id} → {target}")

    fetcher = PlaceholderFetcher() if args.placeholder else None
    last = None
    with AcquisitionTracker(fetcher=fetcher) as tracker:
        for event in tracker.events(model, target):
            last = event
            print(f"   [{event.status.value:<11}] {event.progress:>4.0%} {event.message}")

    if last is None or last.status != LoadStatus.LOADED:
        error = last.error if last is not None else "no progress reported"
        print(f"\n❌ Error: {error}")
        sys.exit(1)

    print(f"\n🎉 Model ready: {target}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lumen-focus",
        description="Lumen Focus - Productive/unproductive content classifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", help="Path to configuration YAML file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: from config, else INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Classify command
    classify_parser = subparsers.add_parser("classify", help="Classify a piece of text")
    classify_parser.add_argument("text", help="Text to classify")
    classify_parser.add_argument("--app", help="Originating app package name")
    classify_parser.add_argument("--model", help="Path to a GGUF model file")
    classify_parser.add_argument(
        "--runtime",
        choices=["auto", "llama_cpp", "heuristic"],
        help="Backend runtime (default: from config, else auto)",
    )
    classify_parser.add_argument(
        "--raw", action="store_true", help="Skip context adjustments"
    )
    classify_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    classify_parser.set_defaults(func=cmd_classify)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a model file")
    validate_parser.add_argument("path", help="Path to the model file")
    validate_parser.add_argument("--checksum", help="Expected SHA-256 digest")
    validate_parser.set_defaults(func=cmd_validate)

    # Models command
    models_parser = subparsers.add_parser("models", help="List catalog models")
    models_parser.add_argument("--dir", help="Models directory")
    models_parser.set_defaults(func=cmd_models)

    # Download command
    download_parser = subparsers.add_parser("download", help="Download a catalog model")
    download_parser.add_argument("model_id", help="Catalog model id")
    download_parser.add_argument("--dir", help="Models directory")
    download_parser.add_argument(
        "--placeholder",
        action="store_true",
        help="Write a placeholder artifact instead of downloading",
    )
    download_parser.set_defaults(func=cmd_download)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        settings = load_settings(args)
        setup_logging(
            level=args.log_level or settings.logging.level,
            log_file=settings.logging.log_file,
        )
        args.func(args, settings)
    except (ConfigError, ResourceError, BackendError) as e:
        print(f"❌ Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
