"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Narytree, a product of Garudex Labs

CLI context for Narytree.

Holds the loaded configuration and resolves the tree settings each command
builds with.
"""

from typing import Optional, Tuple

import click

from narytree.config.settings import NaryTreeConfig, get_default_config
from narytree.merkle.hashing import HashFunction, hash_function_for


class CLIContext:
    """Context object shared by the tree commands."""

    def __init__(self):
        self.config: Optional[NaryTreeConfig] = None
        self.config_path: Optional[str] = None
        self.verbose = False

    def tree_settings(
        self,
        children: Optional[int] = None,
        hash_name: Optional[str] = None,
    ) -> Tuple[int, HashFunction]:
        """
        Resolve branching factor and hash provider.

        Command-line options win over the configuration file, which wins over
        the built-in defaults.

        Args:
            children: --children option value, if given
            hash_name: --hash option value, if given

        Returns:
            Tuple of (number_of_children, hash_function)

        Raises:
            UnsupportedHashAlgorithmError: If the algorithm name is unknown
        """
        tree_config = (self.config or get_default_config()).tree
        number_of_children = children if children is not None else tree_config.number_of_children
        return number_of_children, hash_function_for(hash_name or tree_config.hash_algorithm)


pass_context = click.make_pass_decorator(CLIContext, ensure=True)
