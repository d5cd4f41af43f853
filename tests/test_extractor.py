from __future__ import annotations

import json

import pytest

from ingress.defaults import Backend
from ingress.errors import InvalidCIDR
from ingress.extractor import AnnotationExtractor
from ingress.ipwhitelist import WHITELIST, SourceRange
from ingress.logger import AnnotationLogger
from ingress.parser import get_bool_annotation
from ingress.resource import Ingress


@pytest.fixture
def logger(tmp_path):
    log = AnnotationLogger(tmp_path / "ingress.log", "DEBUG")
    yield log
    log.close()


def _events(logger):
    logger._handler.flush()
    return [json.loads(ln) for ln in logger.path.read_text(encoding="utf-8").splitlines()]


def test_extract_whitelist(logger, manifest):
    ing = Ingress.from_manifest(manifest)
    extractor = AnnotationExtractor(logger=logger)
    results = extractor.extract(ing)

    assert results == {"whitelist": SourceRange(cidr=["1.1.1.1/32", "2.2.2.2/32", "3.3.3.0/24"])}
    assert extractor.errors == []

    (event,) = _events(logger)
    assert event["event"] == "parsed"
    assert event["ingress"] == "web/foo"
    assert event["annotation"] == WHITELIST
    assert event["cidr"] == ["1.1.1.1/32", "2.2.2.2/32", "3.3.3.0/24"]


def test_extract_missing_is_not_an_error(logger):
    extractor = AnnotationExtractor(logger=logger)
    results = extractor.extract(Ingress(name="bar"))

    assert results["whitelist"].cidr == []
    assert extractor.errors == []
    (event,) = _events(logger)
    assert event["event"] == "missing"
    assert event["ingress"] == "default/bar"


def test_extract_invalid_records_error(logger):
    extractor = AnnotationExtractor(logger=logger)
    results = extractor.extract(Ingress(name="bar", annotations={WHITELIST: "www"}))

    assert results["whitelist"].cidr == []
    ((name, err),) = extractor.errors
    assert name == "whitelist"
    assert isinstance(err, InvalidCIDR)
    (event,) = _events(logger)
    assert event["event"] == "invalid"
    assert "www" in event["reason"]


def test_extract_without_logger():
    extractor = AnnotationExtractor()
    results = extractor.extract(Ingress(annotations={WHITELIST: "10.0.0.0/24"}))
    assert results["whitelist"].cidr == ["10.0.0.0/24"]


def test_register_sibling_parser():
    seen = []

    def ssl_redirect(backend, ing):
        seen.append(backend)
        return get_bool_annotation("ingress.kubernetes.io/ssl-redirect", ing)

    backend = Backend(ssl_redirect=False)
    extractor = AnnotationExtractor(backend)
    extractor.register("ssl_redirect", ssl_redirect, "ingress.kubernetes.io/ssl-redirect")
    ing = Ingress(
        annotations={
            WHITELIST: "10.0.0.0/24",
            "ingress.kubernetes.io/ssl-redirect": "true",
        }
    )
    results = extractor.extract(ing)

    assert results["ssl_redirect"] is True
    assert results["whitelist"].cidr == ["10.0.0.0/24"]
    assert seen == [backend]


def test_extract_none_resource(logger):
    extractor = AnnotationExtractor(logger=logger)
    results = extractor.extract(None)

    assert results["whitelist"].cidr == []
    assert extractor.errors == []
    (event,) = _events(logger)
    assert event["event"] == "missing"
    assert event["ingress"] == "-"
