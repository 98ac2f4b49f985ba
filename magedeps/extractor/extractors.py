"""Dependency-name extractors, one per place a mage-init declaration can live.

Each extractor returns module names in source order and raises an
:class:`~magedeps.exceptions.ExtractionError` subclass when the fragment is
not valid JavaScript or does not have the expected shape.
"""

from __future__ import annotations

from magedeps.exceptions import ShapeMismatchError
from magedeps.extractor.fragment import parse_binding_list, parse_object_literal
from magedeps.extractor.models import ObjectExpression

MAGE_INIT_BINDING = "mageInit"


def extract_data_mage_init(attr_value: str) -> list[str]:
    """Module names from a ``data-mage-init`` attribute.

    ``data-mage-init='{"Magento_Ui/js/modal/modal": {"type": "popup"}}'``
    yields ``["Magento_Ui/js/modal/modal"]``.
    """
    return _keys(parse_object_literal(attr_value), attr_value)


def extract_data_bind(attr_value: str) -> list[str]:
    """Module names from the ``mageInit`` directive of a Knockout ``data-bind``.

    The attribute holds a comma-separated list of bindings with no enclosing
    braces, so the other bindings (``click: doSomething`` ...) must parse too.
    """
    bindings = parse_binding_list(attr_value)
    mage_init = bindings.find(MAGE_INIT_BINDING)
    if mage_init is None:
        raise ShapeMismatchError(attr_value, f"no {MAGE_INIT_BINDING} binding")
    if not isinstance(mage_init.value, ObjectExpression):
        raise ShapeMismatchError(attr_value, f"{MAGE_INIT_BINDING} is not an object")
    return _keys(mage_init.value, attr_value)


def extract_x_magento_init(script_body: str) -> list[str]:
    """Module names from a ``<script type="text/x-magento-init">`` body.

    Top-level keys are DOM selectors (``"*"``, ``"#product-form"`` ...) and
    are discarded; the keys one level deeper are the modules.
    """
    selectors = parse_object_literal(script_body)
    deps: list[str] = []
    for selector in selectors.properties:
        if not isinstance(selector.value, ObjectExpression):
            raise ShapeMismatchError(
                script_body, f"selector {selector.key!r} does not map to an object"
            )
        deps.extend(_keys(selector.value, script_body))
    return deps


def _keys(obj: ObjectExpression, fragment: str) -> list[str]:
    keys: list[str] = []
    for prop in obj.properties:
        if prop.key is None:
            raise ShapeMismatchError(fragment, "property key is not a static name")
        keys.append(prop.key)
    return keys
