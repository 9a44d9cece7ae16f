"""Extraction adapters: turn a page into text or markdown."""

from sitecompiler.extract.generative import extract_via_generative_model
from sitecompiler.extract.hosted import extract_via_hosted_api
from sitecompiler.extract.local import extract_locally

__all__ = ["extract_via_hosted_api", "extract_via_generative_model", "extract_locally"]
