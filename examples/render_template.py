#!/usr/bin/env python3
"""
Render a header template (a file or a built-in preset) and print the
ordered header structure as JSON.

    python examples/render_template.py --preset chrome_120 \
        method=GET authority=example.com path=/
    python examples/render_template.py --file request.tmpl user=alice
"""

import json
import sys

import click

from headerplate import HeaderplateError, get_template, parse_header_template


@click.command()
@click.option("--file", "template_file", type=click.File("r"), help="Template file to render.")
@click.option("--preset", help="Built-in template name, e.g. chrome_120.")
@click.option(
    "--keep-content-length",
    is_flag=True,
    help="Store content-length values like any other header.",
)
@click.argument("data", nargs=-1)
def main(template_file, preset, keep_content_length, data) -> None:
    if bool(template_file) == bool(preset):
        raise click.UsageError("pass exactly one of --file or --preset")
    try:
        source = template_file.read() if template_file else get_template(preset)
    except KeyError as exc:
        raise click.BadParameter(str(exc), param_hint="--preset") from exc

    values = {}
    for item in data:
        key, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected key=value, got {item!r}", param_hint="DATA")
        values[key] = value

    try:
        parsed = parse_header_template(
            source, values, suppress_content_length=not keep_content_length
        )
    except HeaderplateError as exc:
        click.secho(f"error: {exc}", fg="red", err=True)
        sys.exit(1)

    click.echo(json.dumps(parsed.to_header_map(), indent=2))


if __name__ == "__main__":
    main()
