import typing

import click

from triedex import config
from triedex.index import EntityIndex
from triedex.index import dump_index
from triedex.index import get_index
from triedex.index import load_entities
from triedex.index import load_index
from triedex.lib.entities import ENTITY_LIST_CODEC
from triedex.lib.entities import generate_entities
from triedex.lib.entities import print_entities
from triedex.lib.entities import sort_entities
from triedex.lib.errors import TriedexError


def _fail(e: TriedexError) -> typing.NoReturn:
    raise click.ClickException(str(e))


@click.option(
    "-n", "--num-entities", type=int, default=config.NUM_ENTITIES, show_default=True
)
@click.option("-s", "--sort", "sort_by_score", is_flag=True)
@click.option("-o", "--output", type=click.Path(dir_okay=False, writable=True))
def generate(num_entities, sort_by_score, output):
    try:
        entities = generate_entities(num_entities)
    except TriedexError as e:
        _fail(e)
    if sort_by_score:
        entities = sort_entities(entities)
    print_entities(entities, echo=click.echo)
    if output:
        with open(output, "w") as f:
            f.write(ENTITY_LIST_CODEC.encode(entities))
        click.echo(f"Wrote {len(entities)} entities to {output}")


@click.option(
    "-n", "--num-entities", type=int, default=config.NUM_ENTITIES, show_default=True
)
@click.option("-e", "--entities", "entities_path", type=click.Path(exists=True))
@click.option(
    "-m", "--max-results", type=int, default=config.MAX_RESULTS, show_default=True
)
@click.option("-d", "--delimiter", default=config.DELIMITER, show_default=True)
@click.option("-o", "--output", type=click.Path(dir_okay=False, writable=True))
def build_index(num_entities, entities_path, max_results, delimiter, output):
    try:
        if entities_path:
            entities = load_entities(entities_path)
        else:
            entities = generate_entities(num_entities)
        index = EntityIndex.build(entities, max_results, delimiter)
    except TriedexError as e:
        _fail(e)
    click.echo(
        f"Indexed {len(index.entities)} entities "
        f"({len(index.trie)} nodes, max_results={index.max_results})"
    )
    if output:
        dump_index(index, output)
        click.echo(f"Wrote index to {output}")


@click.argument("prefix")
@click.option("-i", "--index", "index_path", type=click.Path(exists=True))
def query(prefix, index_path):
    try:
        index = load_index(index_path) if index_path else get_index()
    except TriedexError as e:
        _fail(e)
    results = index.search(prefix)
    if not results:
        click.echo(f"No results for {prefix!r}")
        return
    print_entities(results, echo=click.echo)
