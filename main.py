import json
import sys
from dotenv import load_dotenv

load_dotenv(override=True)

from ingress.config import load_config
from ingress.defaults import Backend
from ingress.errors import InvalidContent
from ingress.extractor import AnnotationExtractor
from ingress.logger import AnnotationLogger
from ingress.resource import Ingress


def _to_json(policy):
    return policy.to_dict() if hasattr(policy, "to_dict") else policy


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("usage: main.py MANIFEST.json", file=sys.stderr)
        return 2

    config = load_config()
    try:
        with open(argv[0], encoding="utf-8") as fh:
            ing = Ingress.from_manifest(json.load(fh))
    except (OSError, ValueError, InvalidContent) as e:
        print(f"▸ cannot load {argv[0]}: {e}", file=sys.stderr)
        return 2

    try:
        logger = AnnotationLogger(config.log_path, config.log_level)
    except (OSError, ValueError) as e:
        print(f"▸ cannot open log {config.log_path}: {e}", file=sys.stderr)
        return 2

    try:
        extractor = AnnotationExtractor(
            Backend(whitelist_source_range=config.default_whitelist), logger
        )
        results = extractor.extract(ing)
    finally:
        logger.close()

    print(json.dumps({k: _to_json(v) for k, v in results.items()}))
    for name, err in extractor.errors:
        print(f"▸ {ing.key}: {name}: {err}", file=sys.stderr)
    if config.strict and extractor.errors:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
