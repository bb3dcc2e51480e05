"""Serializers turning :class:`NegativeControl` records into output formats."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .controls import NegativeControl, QualifierPair


def ruby_literal(value: Any) -> str:
    """Return ``value`` as a Ruby literal suitable for InSpec source."""

    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(ruby_literal(item) for item in value) + "]"
    if isinstance(value, dict):
        items = ", ".join(f"{ruby_literal(str(k))} => {ruby_literal(v)}" for k, v in value.items())
        return "{" + items + "}"
    text = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{text}'"


def _escape_double(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("#{", "\\#{")


def _ruby_double_quoted(value: str) -> str:
    return f'"{_escape_double(value)}"'


def _hash_body(pairs: Iterable[QualifierPair]) -> str:
    return "".join(f"{name}: {ruby_literal(value)}, " for name, value in pairs)


def format_qualifiers(pairs: Iterable[QualifierPair]) -> str:
    """Return a compact ``name=value`` summary of qualifier pairs."""

    return ", ".join(f"{name}={'' if value is None else value}" for name, value in pairs)


def _header_lines(control: NegativeControl) -> List[str]:
    description = "\n".join(
        f"    {_escape_double(line)}" if line else "" for line in control.description.split("\n")
    )
    return [
        f"control {_ruby_double_quoted(control.id)} do",
        f"  title {_ruby_double_quoted(control.title)}",
        f"  desc \"\n{description}\"",
        "",
        f"  impact {control.impact}",
    ]


def _render_unmatched(control: NegativeControl) -> List[str]:
    qualifiers = ", ".join(f"{name}: {ruby_literal(value)}" for name, value in control.qualifiers)
    return [
        f"  describe {control.iterator}({{{qualifiers}}}) do",
        "    it { should_not exist }",
        "  end",
    ]


def _render_matched(control: NegativeControl) -> List[str]:
    lines = [f"  ({control.iterator}.where({{ {_hash_body(control.qualifiers)}}}).{control.index} - ["]
    lines.extend(f"    {ruby_literal(instance_id)}," for instance_id in control.excluded_instance_ids)
    lines.append("  ]).each do |id|")
    lines.append(
        f"    describe {control.resource}({{ {control.id_qualifier}: id, "
        f"{_hash_body(control.resource_qualifiers)}}}) do"
    )
    lines.extend(["      it { should_not exist }", "    end", "  end"])
    return lines


def render_inspec_control(control: NegativeControl) -> str:
    """Return InSpec Ruby source for a single control."""

    lines = _header_lines(control)
    if control.scope == "matched":
        lines.extend(_render_matched(control))
    else:
        lines.extend(_render_unmatched(control))
    lines.append("end")
    return "\n".join(lines) + "\n"


def render_inspec_profile(controls: Iterable[NegativeControl]) -> str:
    """Return InSpec Ruby source for all *controls* separated by blank lines."""

    return "\n".join(render_inspec_control(control) for control in controls)


def control_to_dict(control: NegativeControl) -> Dict[str, Any]:
    """Return a JSON-compatible representation of *control*."""

    data: Dict[str, Any] = {
        "id": control.id,
        "title": control.title,
        "description": control.description,
        "impact": control.impact,
        "scope": control.scope,
        "iterator": control.iterator,
        "qualifiers": [[name, value] for name, value in control.qualifiers],
    }
    if control.scope == "matched":
        data.update(
            {
                "index": control.index,
                "excluded_instance_ids": list(control.excluded_instance_ids),
                "resource": control.resource,
                "id_qualifier": control.id_qualifier,
                "resource_qualifiers": [[name, value] for name, value in control.resource_qualifiers],
            }
        )
    return data


__all__ = [
    "control_to_dict",
    "format_qualifiers",
    "render_inspec_control",
    "render_inspec_profile",
    "ruby_literal",
]
