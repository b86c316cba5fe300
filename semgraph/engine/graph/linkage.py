"""Code <-> documentation linkage.

``code_to_assets`` maps ``"path:function"`` symbols to documentation assets
and ``asset_to_code`` maps asset paths back to code locations. The two
maps form one bidirectional index and must agree.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from ...models.enums import AssetRelevance
from ...models.linkage import CodeRef, LinkedAsset, Linkage
from ...models.validation import ValidationFinding

logger = logging.getLogger(__name__)

SYMBOL_SEPARATOR = ":"
RELEVANCE_LEVELS = {r.value for r in AssetRelevance}

# Optional schema check (e.g. a JSON Schema compiled from a spec file).
# Receives the raw payload and yields error messages.
SchemaValidator = Callable[[Mapping[str, Any]], Iterable[str]]


def symbol_key(path: str, function: str) -> str:
    """Build the ``code_to_assets`` key for a function in a file."""
    return f"{path}{SYMBOL_SEPARATOR}{function}"


def parse_linkage(payload: Mapping[str, Any]) -> Linkage:
    """Build a Linkage model from a deserialized linkage file.

    Raises:
        pydantic.ValidationError: If the payload does not match the model
    """
    return Linkage.model_validate(dict(payload))


def validate_linkage(
    payload: Mapping[str, Any],
    schema_validator: SchemaValidator | None = None,
) -> list[ValidationFinding]:
    """Structurally validate a raw linkage payload.

    The built-in check validates the payload against the ``Linkage`` model,
    checks asset relevance levels, then runs the bidirectional consistency
    check. An externally loaded schema can be plugged in as
    ``schema_validator``; it is optional and the built-in checks do not
    depend on it.
    """
    errors: list[ValidationFinding] = []

    if schema_validator is not None:
        for message in schema_validator(payload):
            errors.append(ValidationFinding(field="schema", message=message))

    try:
        linkage = parse_linkage(payload)
    except ValidationError as e:
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"])
            errors.append(ValidationFinding(field=location or None, message=err["msg"]))
        return errors

    for symbol, mapping in linkage.code_to_assets.items():
        for asset in mapping.assets:
            if asset.relevance not in RELEVANCE_LEVELS:
                errors.append(
                    ValidationFinding(
                        entity_id=symbol,
                        field="relevance",
                        message=f"Invalid relevance for {asset.path}: {asset.relevance}",
                    )
                )

    errors.extend(validate_bidirectional_consistency(linkage))
    return errors


def find_docs_for_symbol(linkage: Linkage, symbol: str) -> list[LinkedAsset]:
    """Documentation assets linked to a code symbol."""
    mapping = linkage.code_to_assets.get(symbol)
    return list(mapping.assets) if mapping else []


def find_code_for_doc(linkage: Linkage, doc_path: str) -> list[CodeRef]:
    """Code locations linked to a documentation asset."""
    mapping = linkage.asset_to_code.get(doc_path)
    return list(mapping.code_refs) if mapping else []


def validate_bidirectional_consistency(linkage: Linkage) -> list[ValidationFinding]:
    """Check that both maps mirror each other.

    Every asset referenced from ``code_to_assets`` needs an ``asset_to_code``
    entry, and every ``(path, function)`` reachable from ``asset_to_code``
    needs a ``"path:function"`` key in ``code_to_assets``. Both directions
    are checked in full; each missing entry is reported once.
    """
    errors: list[ValidationFinding] = []

    missing_assets: set[str] = set()
    for symbol, mapping in linkage.code_to_assets.items():
        for asset in mapping.assets:
            if asset.path in linkage.asset_to_code or asset.path in missing_assets:
                continue
            missing_assets.add(asset.path)
            errors.append(
                ValidationFinding(
                    entity_id=asset.path,
                    field="asset_to_code",
                    message=f"Missing reverse mapping: {asset.path} not in asset_to_code "
                    f"(referenced by {symbol})",
                )
            )

    missing_symbols: set[str] = set()
    for doc_path, mapping in linkage.asset_to_code.items():
        for code_ref in mapping.code_refs:
            for func in code_ref.functions:
                symbol = symbol_key(code_ref.path, func)
                if symbol in linkage.code_to_assets or symbol in missing_symbols:
                    continue
                missing_symbols.add(symbol)
                errors.append(
                    ValidationFinding(
                        entity_id=symbol,
                        field="code_to_assets",
                        message=f"Missing forward mapping: {symbol} not in code_to_assets "
                        f"(referenced by {doc_path})",
                    )
                )

    if errors:
        logger.debug(f"Linkage has {len(errors)} consistency findings")
    return errors
