"""Named export formats: the built-in set plus user-declared extras."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence


@dataclass(frozen=True)
class FormatOption:
    id: str
    label: str
    template: str


DEFAULT_FORMAT_ID = 'start-title-performer'
CUSTOM_FORMAT_ID = 'custom'
DEFAULT_CUSTOM_TEMPLATE = '{start} {title}'

BUILTIN_FORMATS = (
    FormatOption('start-title-performer', 'Start + Title + Performer',
                 '{start} {title} by {artist}'),
    FormatOption('start-performer-title', 'Start + Performer + Title',
                 '{start} {artist} - {title}'),
    FormatOption('title-performer-start', 'Title + Performer + Start',
                 '{title} - {artist} ({start})'),
    FormatOption('csv', 'CSV', '{track_no},{start},{title},{artist}'),
    FormatOption(CUSTOM_FORMAT_ID, 'Custom', DEFAULT_CUSTOM_TEMPLATE),
)


def build_format_options(extra: Optional[Mapping[str, Any]] = None) -> List[FormatOption]:
    """Return the built-in formats followed by formats declared in ``extra``.

    ``extra`` maps a format id to ``{'label': ..., 'template': ...}``, as read
    from the ``formats`` section of the YAML config. An entry whose id matches
    a built-in overrides its label and/or template; the ``custom`` template is
    never overridden here (it comes from ``custom_template``). New ids must
    carry a template.
    """
    if extra is not None and not isinstance(extra, Mapping):
        raise ValueError("formats must be a mapping")

    options: Dict[str, FormatOption] = {opt.id: opt for opt in BUILTIN_FORMATS}

    for format_id, entry in (extra or {}).items():
        entry = entry or {}
        if not isinstance(entry, Mapping):
            raise ValueError(f"Format '{format_id}' must be a mapping")
        base = options.get(format_id)
        template = entry.get('template')
        if base is None:
            if not template:
                raise ValueError(f"Format '{format_id}' has no template")
            options[format_id] = FormatOption(
                format_id, str(entry.get('label') or format_id), str(template)
            )
            continue
        if format_id == CUSTOM_FORMAT_ID:
            template = None
        options[format_id] = FormatOption(
            format_id,
            str(entry.get('label') or base.label),
            str(template or base.template),
        )

    return list(options.values())


def get_format(format_id: str, options: Optional[Sequence[FormatOption]] = None) -> FormatOption:
    """Look up a format by id. Raises ``ValueError`` for unknown ids."""
    for option in options if options is not None else BUILTIN_FORMATS:
        if option.id == format_id:
            return option
    raise ValueError(f"Unknown format: {format_id}")


def resolve_template(format_id: str, custom_template: Optional[str] = None,
                     options: Optional[Sequence[FormatOption]] = None) -> str:
    """Return the template for ``format_id``.

    The ``custom`` format uses ``custom_template`` when one is given.
    """
    option = get_format(format_id, options)
    if option.id == CUSTOM_FORMAT_ID and custom_template is not None:
        return custom_template
    return option.template
