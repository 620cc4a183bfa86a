"""
Command-line front end for manual vocabulary tuning.

Usage:
    # Process transcripts given as arguments
    python -m voice_nlu --variant fr-CH "je voudrais septante grammes de fromage"

    # Read one transcript per line from stdin
    cat transcripts.txt | python -m voice_nlu --variant en-GB

    # Add custom vocabulary and print statistics at the end
    python -m voice_nlu --vocab "xyz=Canonical" --stats "xyz please"

    # Serve the HTTP API
    python -m voice_nlu --serve --port 8001

    # List supported variants
    python -m voice_nlu --list
"""

import argparse
import json
import sys

from .config import DEFAULT_VARIANT
from .engine import UtteranceEngine
from .exceptions import UnsupportedVariantError
from .lexicon import supported_variants
from .logging_config import setup_logging
from .schemas.configuration import EngineOptions


def _result(engine: UtteranceEngine, text: str) -> dict:
    return {
        "input": text,
        "canonical_text": engine.process_transcript(text),
        "classification": engine.classify_intent(text).model_dump(),
        "entities": engine.extract_entities(text).model_dump(),
    }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="voice_nlu",
        description="Normalize voice order transcripts and extract intents and entities",
    )
    parser.add_argument("texts", nargs="*", help="Transcripts (default: read lines from stdin)")
    parser.add_argument("--variant", default=DEFAULT_VARIANT, help="Language variant")
    parser.add_argument("--context", default="restaurant", help="Conversation context ('none' to disable)")
    parser.add_argument("--vocab", action="append", default=[], metavar="TERM=REPLACEMENT",
                        help="Custom vocabulary entry (repeatable)")
    parser.add_argument("--no-dialects", action="store_true", help="Disable regional dialect mapping")
    parser.add_argument("--no-grammar", action="store_true", help="Disable grammar correction")
    parser.add_argument("--stats", action="store_true", help="Print statistics after processing")
    parser.add_argument("--list", action="store_true", help="List supported variants and exit")
    parser.add_argument("--serve", action="store_true", help="Run the HTTP API with uvicorn")
    parser.add_argument("--host", default=None, help="Host for --serve")
    parser.add_argument("--port", type=int, default=None, help="Port for --serve")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")

    args = parser.parse_args(argv)
    setup_logging(args.log_level or "WARNING")

    if args.list:
        for variant in supported_variants():
            print(variant)
        return 0

    if args.serve:
        from .main import run
        run(host=args.host, port=args.port)
        return 0

    options = EngineOptions(
        strict_mode=True,
        enable_regional_dialects=not args.no_dialects,
        handle_grammar=not args.no_grammar,
    )
    try:
        engine = UtteranceEngine(args.variant, options)
    except UnsupportedVariantError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Use --list to see supported variants", file=sys.stderr)
        return 2

    if args.context.lower() != "none" and not engine.set_context(args.context):
        print(f"Error: Unknown context '{args.context}'", file=sys.stderr)
        return 2

    for item in args.vocab:
        term, sep, replacement = item.partition("=")
        if not sep or not engine.add_custom_vocabulary(term, replacement):
            print(f"Error: Invalid vocabulary entry '{item}'", file=sys.stderr)
            return 2

    texts = args.texts or [line.rstrip("\n") for line in sys.stdin if line.strip()]
    for text in texts:
        print(json.dumps(_result(engine, text), ensure_ascii=False))

    if args.stats:
        print(json.dumps(engine.get_statistics(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
