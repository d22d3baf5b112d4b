"""YAML helpers that keep mapping order and duplicate keys."""

from __future__ import annotations

from typing import Any

import yaml  # type: ignore[import-untyped]

from doctoc.json_utils import KeyValuePairs

MERGE_TAG = "tag:yaml.org,2002:merge"


class PairsLoader(yaml.SafeLoader):
    """Safe loader producing ``KeyValuePairs`` instead of dictionaries."""

    def construct_key_value_pairs(self, node: yaml.MappingNode) -> Any:
        explicit = sum(
            1 for key_node, _ in node.value if key_node.tag != MERGE_TAG
        )

        # Resolve ``<<`` merge keys the same way the safe loader does. This
        # puts the merged pairs in front of the explicit ones.
        self.flatten_mapping(node)
        pairs = self.construct_pairs(node, deep=True)
        split = len(pairs) - explicit
        merged, own = pairs[:split], pairs[split:]

        # Explicit keys override merged ones and, among merged pairs, the
        # last occurrence wins as it would in a dictionary.
        seen = [key for key, _ in own]
        kept = []
        for key, value in reversed(merged):
            if key in seen:
                continue
            seen.append(key)
            kept.append((key, value))
        kept.reverse()
        return KeyValuePairs(kept + own)


PairsLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    PairsLoader.construct_key_value_pairs,
)


def yaml_loads_pairs(text: str) -> Any:
    """Deserialize a YAML document keeping every mapping as pairs.

    Args:
        text: YAML content.

    Returns:
        Parsed value where mappings are ``KeyValuePairs``.
    """

    return yaml.load(text, Loader=PairsLoader)  # noqa: S506


def yaml_dumps(data: object) -> str:
    """Serialize data to block-style YAML preserving key order."""
    return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
