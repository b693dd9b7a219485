# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Org chart - Example of building, pruning and printing a GenericTree.

A didactic example showing the typical cycle: grow the tree through
add_child, delete a few subtrees, compress once, then print.
"""

from __future__ import annotations

import logging
import sys

from genro_generictree import GenericTree


def build_company() -> tuple[GenericTree, dict]:
    """Build a small company hierarchy and return it with its departments."""
    tree = GenericTree('CEO')
    ceo = tree.root

    cto = ceo.add_child('CTO')
    backend = cto.add_child('Backend')
    backend.add_child('API')
    backend.add_child('Storage')
    cto.add_child('Frontend')

    cfo = ceo.add_child('CFO')
    cfo.add_child('Accounting')

    legal = ceo.add_child('Legal')
    legal.add_child('Contracts')

    return tree, {'cto': cto, 'backend': backend, 'cfo': cfo, 'legal': legal}


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    tree, departments = build_company()
    print(tree)

    released = []
    tree.subscribe('audit', release=lambda node, value: released.append(value))

    # Legal is outsourced and Storage merged into API.
    tree.debug = True
    tree.delete_subtree(departments['legal'])
    tree.delete_subtree(departments['backend'].children[1])
    tree.debug = False

    print(tree)
    tree.compress()
    tree.write(sys.stdout)
    print(f"Released: {', '.join(released)}")

    with tree:
        pass
    print(tree)


if __name__ == '__main__':
    main()
