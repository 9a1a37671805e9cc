#!/usr/bin/env python
"""Command-line interface for MemoraHanzi."""

import asyncio
import click
import json
import sys

from memora_hanzi.config.dependencies import create_dependencies
from memora_hanzi.config.settings import settings
from memora_hanzi.constants import APP_NAME, ARXIV_DISCLAIMER_TEXT
from memora_hanzi.errors import MemoraHanziError
from memora_hanzi.workflows.name_processing import build_author_classifier, build_pipeline


@click.group()
def cli():
    """MemoraHanzi - memorise Chinese names with Pinyin, keywords and pictures."""
    pass


@cli.command()
@click.argument("name", required=True)
@click.option("--keyword", "-k", "extra_keywords", multiple=True, help="Add a custom keyword (repeatable)")
@click.option("--image", is_flag=True, help="Also generate the mnemonic image")
@click.option("--output", "-o", type=click.Path(), help="Save the name record to a JSON file")
def process(name, extra_keywords, image, output):
    """
    Derive Pinyin and keywords for NAME, optionally with a mnemonic image.

    NAME may be written in Hanzi or in Pinyin.
    """
    pipeline = build_pipeline(create_dependencies(settings))

    async def run_pipeline():
        await pipeline.submit(name)
        for keyword in extra_keywords:
            pipeline.add_keyword(keyword)
        if image and pipeline.can_generate_image:
            await pipeline.generate_image()
        return pipeline.record

    record = asyncio.run(run_pipeline())

    click.echo(f"Name: {record.original_name}")
    if record.pinyin:
        click.echo(f"  Pinyin: {record.pinyin}")
        click.echo(f"  Syllables: {' | '.join(record.syllables or [])}")
    if pipeline.keywords:
        click.echo("  Keywords:")
        for keyword in pipeline.keywords:
            click.echo(f"    • {keyword}")
    if record.image_url:
        click.echo(f"  Image: generated ({len(record.image_url)} characters of data URI)")

    if output:
        data = record.model_dump(by_alias=True, exclude_none=True)
        data["editableKeywords"] = pipeline.keywords.as_list()
        with open(output, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        click.echo(f"\nName record saved to: {output}")

    if record.error:
        click.echo(f"Error: {record.error}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def authors(source):
    """
    Flag potentially Chinese names in an author list.

    SOURCE is a file of names separated by commas, semicolons or newlines;
    standard input is read when it is omitted.
    """
    classifier = build_author_classifier(create_dependencies(settings))
    try:
        records = asyncio.run(classifier.classify_authors(source.read()))
    except MemoraHanziError as e:
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)

    for author in records:
        marker = " (Potential)" if author.is_potentially_chinese else ""
        click.echo(f"  • {author.name}{marker}")
    click.echo(f"\n{ARXIV_DISCLAIMER_TEXT}")


@cli.command()
def config():
    """Show current configuration settings."""
    click.echo(f"{APP_NAME} Configuration:")
    click.echo(f"  API Key: {'set' if settings.gemini_api_key else 'NOT SET'}")
    click.echo(f"  Text Model: {settings.text_model_name}")
    click.echo(f"  Image Model: {settings.image_model_name}")
    click.echo(f"  Keyword Attempts: {settings.keyword_max_attempts}")
    click.echo(f"  LangSmith Tracing: {settings.langchain_tracing_v2}")


if __name__ == "__main__":
    cli()
