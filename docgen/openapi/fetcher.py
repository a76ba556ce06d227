"""Fetch, validate and index an OpenAPI document."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import unquote, urldefrag, urljoin, urlparse

import requests
import yaml
from jsonschema.exceptions import ValidationError
from openapi_spec_validator import validate
from openapi_spec_validator.validation.exceptions import OpenAPIValidationError, ValidatorDetectError
from referencing.exceptions import Unresolvable, Unretrievable

from docgen.errors import SpecError
from docgen.net import get_text
from docgen.models import OpenApiIndex
from docgen.utils import get_logger

logger = get_logger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")
MAX_REF_HOPS = 10


def _base_uri(ref: str) -> str:
    """Absolute URI of the document, used to resolve relative ``$ref``s."""
    parsed = urlparse(ref)
    if parsed.scheme in {"http", "https", "file"}:
        return ref
    return Path(ref).resolve().as_uri()


def _read_source(uri: str, timeout: float) -> str:
    parsed = urlparse(uri)
    if parsed.scheme in {"http", "https"}:
        try:
            return get_text(uri, timeout=timeout)
        except requests.RequestException as e:
            raise SpecError(f"cannot fetch OpenAPI document {uri}: {e}") from e

    if parsed.scheme and parsed.scheme != "file":
        raise SpecError(f"unsupported OpenAPI reference scheme: {parsed.scheme}")
    path = Path(unquote(parsed.path) if parsed.scheme else uri)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise SpecError(f"cannot read OpenAPI document {path}: {e}") from e


def _stringify_keys(node: Any) -> Any:
    # YAML reads unquoted status codes such as `200:` as integers
    if isinstance(node, dict):
        return {str(k): _stringify_keys(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_stringify_keys(v) for v in node]
    return node


def _load_document(uri: str, timeout: float) -> Dict[str, Any]:
    raw = _read_source(uri, timeout)
    try:
        doc = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise SpecError(f"OpenAPI document {uri} is not valid JSON/YAML: {e}") from e
    if not isinstance(doc, dict):
        raise SpecError(f"OpenAPI document {uri} must be a mapping")
    return _stringify_keys(doc)


def _follow_pointer(doc: Any, pointer: str, ref: str) -> Any:
    node = doc
    for token in [t for t in pointer.split("/") if t]:
        token = unquote(token).replace("~1", "/").replace("~0", "~")
        if isinstance(node, list) and token.isdigit() and int(token) < len(node):
            node = node[int(token)]
        elif isinstance(node, dict) and token in node:
            node = node[token]
        else:
            raise SpecError(f"unresolvable $ref {ref}")
    return node


class _RefResolver:
    """Resolves ``$ref`` chains against the root document and sibling files."""

    def __init__(self, root: Dict[str, Any], base_uri: str, timeout: float):
        self.timeout = timeout
        self._documents = {base_uri: root}

    def _document(self, uri: str) -> Dict[str, Any]:
        if uri not in self._documents:
            self._documents[uri] = _load_document(uri, self.timeout)
        return self._documents[uri]

    def resolve(self, node: Any, base_uri: str) -> Tuple[Any, str]:
        for _ in range(MAX_REF_HOPS):
            if not (isinstance(node, dict) and isinstance(node.get("$ref"), str)):
                return node, base_uri
            ref = node["$ref"]
            target, fragment = urldefrag(urljoin(base_uri, ref))
            node = _follow_pointer(self._document(target), fragment, ref)
            base_uri = target
        raise SpecError(f"$ref chain too deep at {base_uri}")


def build_index(spec: Dict[str, Any], resolver: Optional[_RefResolver] = None, base_uri: str = "") -> OpenApiIndex:
    """Shape a validated document into a path -> [(METHOD, summary)] index."""
    resolver = resolver or _RefResolver(spec, base_uri, timeout=30.0)
    info = spec.get("info") or {}
    paths: Dict[str, List[Tuple[str, str]]] = {}
    for path, item in (spec.get("paths") or {}).items():
        item, item_uri = resolver.resolve(item, base_uri)
        if not isinstance(item, dict):
            continue
        operations = []
        for method in item:
            if method.lower() not in HTTP_METHODS:
                continue
            operation, _ = resolver.resolve(item[method] or {}, item_uri)
            operations.append((method.upper(), (operation or {}).get("summary") or ""))
        paths[path] = operations
    return OpenApiIndex(
        title=str(info.get("title", "")),
        version=str(info.get("version", "")),
        paths=paths,
    )


def fetch_openapi_index(ref: str, timeout: float = 30.0) -> OpenApiIndex:
    """Retrieve the document at ``ref`` (URL or path), validate it and index it.

    Relative ``$ref``s are resolved against ``ref``, so a spec split across
    several files validates as a whole.

    Raises:
        SpecError: on retrieval failure, unparsable content, an unresolvable
            ``$ref`` or an invalid document.
    """
    if not ref:
        raise SpecError("no OpenAPI reference configured")

    base_uri = _base_uri(ref)
    spec = _load_document(base_uri, timeout)

    try:
        validate(spec, base_uri=base_uri)
    except (OpenAPIValidationError, ValidatorDetectError, ValidationError) as e:
        logger.error("Error parsing OpenAPI spec: %s", getattr(e, "message", e))
        raise SpecError(f"invalid OpenAPI document {ref}: {getattr(e, 'message', e)}") from e
    except (Unresolvable, Unretrievable) as e:
        logger.error("Error resolving OpenAPI $ref: %s", e)
        raise SpecError(f"unresolvable $ref in OpenAPI document {ref}: {e}") from e

    index = build_index(spec, _RefResolver(spec, base_uri, timeout), base_uri)
    logger.info("API name: %s, Version: %s", index.title, index.version)
    return index
