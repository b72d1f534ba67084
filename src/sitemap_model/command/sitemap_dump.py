from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from xml.etree.ElementTree import ParseError

import click

from sitemap_model.common.logger import setup_logging
from sitemap_model.config.settings import load_sitemap_config
from sitemap_model.error_codes import MalformedWidgetPayloadError
from sitemap_model.widget.event_patcher import apply_event
from sitemap_model.widget.json_builder import parse_sitemap_json
from sitemap_model.widget.protocol import Widget
from sitemap_model.widget.xml_builder import parse_sitemap_xml

logger = logging.getLogger(__name__)


def detect_payload_format(text: str) -> str:
    """Guess ``xml`` or ``json`` from the first non-blank character."""
    stripped = text.lstrip()
    return "xml" if stripped.startswith("<") else "json"


def build_widgets(text: str, payload_format: str, icon_format: Optional[str]) -> List[Widget]:
    if payload_format == "xml":
        return parse_sitemap_xml(text)
    return parse_sitemap_json(text, icon_format)


def patch_widget(
    widgets: List[Widget],
    widget_id: str,
    delta: Dict[str, Any],
    icon_format: Optional[str],
) -> List[Widget]:
    patched: List[Widget] = []
    found = False
    for widget in widgets:
        if widget.id == widget_id:
            widget = apply_event(widget, delta, icon_format)
            found = True
        patched.append(widget)
    if not found:
        raise click.BadParameter(f"No widget with id {widget_id!r} in payload.", param_hint="--widget-id")
    return patched


def widget_to_dict(widget: Widget) -> Dict[str, Any]:
    payload = widget.model_dump(mode="json", exclude={"item", "linked_page"})
    payload["state"] = widget.state.as_string if widget.state is not None else None
    payload["item"] = widget.item.name if widget.item is not None else None
    payload["linked_page"] = widget.linked_page.id if widget.linked_page is not None else None
    return payload


@click.command(name="sitemap-dump")
@click.argument("payload_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "payload_format",
    type=click.Choice(["auto", "xml", "json"], case_sensitive=False),
    default="auto",
    show_default=True,
    help="Wire format of the payload file.",
)
@click.option(
    "--icon-format",
    type=click.Choice(["png", "svg"], case_sensitive=False),
    default=None,
    help="Icon format for JSON icon paths. Defaults to the configured format.",
)
@click.option(
    "--event",
    "event_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON widget event to apply after building the tree.",
)
@click.option("--widget-id", default=None, help="Id of the widget the event applies to.")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON/YAML config with a 'sitemap_config' block.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def run(
    payload_path: str,
    payload_format: str,
    icon_format: Optional[str],
    event_path: Optional[str],
    widget_id: Optional[str],
    config_path: Optional[str],
    verbose: bool,
) -> None:
    setup_logging(verbose=verbose)
    if config_path:
        load_sitemap_config(config_path)
    if event_path and not widget_id:
        raise click.UsageError("--event requires --widget-id.")

    text = Path(payload_path).read_text(encoding="utf-8")
    resolved_format = payload_format.lower()
    if resolved_format == "auto":
        resolved_format = detect_payload_format(text)

    try:
        widgets = build_widgets(text, resolved_format, icon_format)
        if event_path:
            delta = json.loads(Path(event_path).read_text(encoding="utf-8"))
            widgets = patch_widget(widgets, widget_id, delta, icon_format)
    except (MalformedWidgetPayloadError, json.JSONDecodeError, ParseError) as exc:
        logger.error("Malformed payload %s: %s", payload_path, exc)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)

    logger.info("Built %d widget(s) from %s.", len(widgets), payload_path)
    for widget in widgets:
        click.echo(json.dumps(widget_to_dict(widget), ensure_ascii=False))


if __name__ == "__main__":
    run()
