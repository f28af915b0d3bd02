"""
CLI commands for Merkle tree operations.

Provides commands for:
- Computing the root hash of a block sequence
- Generating the proof for one block
- Verifying a block against a root hash and proof
"""

import json
import sys
from typing import Optional, Tuple

import click

from narytree.exceptions import NaryTreeError
from narytree.merkle import is_proven, new_tree, prove
from narytree.cli.context import CLIContext, pass_context


children_option = click.option(
    '--children',
    '-n',
    type=int,
    default=None,
    help='Number of children per node (default: from configuration, 2)',
)

hash_option = click.option(
    '--hash',
    '-H',
    'hash_name',
    default=None,
    help='hashlib algorithm name (default: from configuration, sha256)',
)


@click.command('root')
@click.argument('blocks', nargs=-1, required=True)
@children_option
@hash_option
@pass_context
def root_command(cli_ctx: CLIContext, blocks: Tuple[str, ...], children: Optional[int], hash_name: Optional[str]):
    """
    Print the root hash of a tree built over BLOCKS.

    Examples:

        narytree root a b c d

        narytree root --children 3 --hash sha3_256 a b c
    """
    try:
        number_of_children, hash_function = cli_ctx.tree_settings(children, hash_name)
        tree = new_tree(blocks, hash_function=hash_function, number_of_children=number_of_children)
    except NaryTreeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if cli_ctx.verbose:
        click.echo(f"Leaves: {tree.leaf_count}, height: {tree.height}", err=True)

    click.echo(tree.root_hash)


@click.command('prove')
@click.argument('blocks', nargs=-1, required=True)
@click.option(
    '--index',
    '-i',
    type=int,
    required=True,
    help='Index of the block to prove',
)
@children_option
@hash_option
@click.option(
    '--format',
    '-f',
    type=click.Choice(['text', 'json'], case_sensitive=False),
    default='text',
    help='Output format (default: text)',
)
@pass_context
def prove_command(
    cli_ctx: CLIContext,
    blocks: Tuple[str, ...],
    index: int,
    children: Optional[int],
    hash_name: Optional[str],
    format: str,
):
    """
    Print the proof for the block at --index among BLOCKS.

    Text output prints one sibling hash per line, leaf level first.

    Examples:

        narytree prove --index 1 a b c d

        narytree prove -i 1 --format json a b c d
    """
    try:
        number_of_children, hash_function = cli_ctx.tree_settings(children, hash_name)
        tree = new_tree(blocks, hash_function=hash_function, number_of_children=number_of_children)
        proof = prove(tree, index)
    except NaryTreeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if format.lower() == 'json':
        click.echo(json.dumps({
            "block": tree.blocks[index],
            "index": index,
            "root": tree.root_hash,
            "proof": proof,
        }, indent=2))
    else:
        for sibling in proof:
            click.echo(sibling)


@click.command('verify')
@click.argument('block')
@click.option(
    '--index',
    '-i',
    type=int,
    required=True,
    help='Index of the block in the original sequence',
)
@click.option(
    '--root',
    '-r',
    'root_hash',
    required=True,
    help='Expected root hash',
)
@click.option(
    '--proof',
    '-p',
    multiple=True,
    help='Sibling hash, leaf level first (repeat once per level)',
)
@hash_option
@pass_context
def verify_command(
    cli_ctx: CLIContext,
    block: str,
    index: int,
    root_hash: str,
    proof: Tuple[str, ...],
    hash_name: Optional[str],
):
    """
    Verify that BLOCK sits at --index under --root.

    Exits with status 0 when the proof holds and 1 otherwise.

    Examples:

        narytree verify b --index 1 \\
            --root 58c89d709329eb37285837b042ab6ff72c7c8f74de0446b091b6a0131c102cfd \\
            --proof ca978112ca1bbdcafac231b39a23dc4da786eff8147c4e72b9807785afee48bb \\
            --proof d3a0f1c792ccf7f1708d5422696263e35755a86917ea76ef9242bd4a8cf4891a
    """
    try:
        _, hash_function = cli_ctx.tree_settings(hash_name=hash_name)
    except NaryTreeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if is_proven(block, index, root_hash, list(proof), hash_function=hash_function):
        click.echo("valid")
    else:
        click.echo("invalid")
        sys.exit(1)
