#!/usr/bin/env python
"""
Export a validated knowledge graph to JSON.

Usage:
    python scripts/export_graph_json.py "machine learning"
    python scripts/export_graph_json.py "Rust ownership" -o data/rust.json
    python scripts/export_graph_json.py --list-templates
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from knowledge_galaxy.services.graph_service import KnowledgeGraphService
from knowledge_galaxy.knowledge_graph.generator import GenericGraphGenerator
from knowledge_galaxy.utils.exceptions import GalaxyGraphError
from knowledge_galaxy.utils.logging_config import setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export a knowledge graph as JSON")
    parser.add_argument("topic", nargs="?", help="Topic to build a graph for")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--seed", type=int, help="Seed for generated importance values")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    parser.add_argument(
        "--list-templates", action="store_true", help="List template topics and exit"
    )
    return parser.parse_args(argv)


async def export_graph(topic: str, output: str = None, seed: int = None, indent: int = 2) -> int:
    """Build, validate and write the graph for ``topic``. Returns the node count."""
    service = KnowledgeGraphService(
        generator=GenericGraphGenerator(seed=seed),
        fetch_delay_seconds=0,
    )
    graph = await service.fetch_graph(topic)
    payload = graph.to_json(indent=indent)

    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload + "\n", encoding="utf-8")
        print(f"[+] Wrote {len(graph.nodes)} nodes and {len(graph.links)} links to {path}")
    else:
        print(payload)
    return len(graph.nodes)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(level="WARNING", include_request_id=False)

    if args.list_templates:
        for key in KnowledgeGraphService().template_keys():
            print(key)
        return 0

    if args.topic is None:
        print("[!] Error: a topic is required", file=sys.stderr)
        return 2

    try:
        asyncio.run(export_graph(args.topic, args.output, args.seed, args.indent))
    except GalaxyGraphError as e:
        print(f"\n[!] Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
