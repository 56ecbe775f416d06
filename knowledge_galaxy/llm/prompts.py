"""Prompts for generating knowledge graphs with a generative model."""

from __future__ import annotations

import json

from ..models.graph import NodeCategory

_CATEGORY_CHOICES = "|".join(category.value for category in NodeCategory)

KNOWLEDGE_GRAPH_SYSTEM_PROMPT = (
    "You are a Knowledge Graph Architect specializing in structured knowledge "
    "representations. Your task is to generate a comprehensive knowledge graph "
    "for the topic given by the user.\n\n"
    "Output requirements:\n"
    "1. Output ONLY valid JSON. No markdown, no explanations, no extra text.\n"
    "2. Structure: one central node (the main topic) connected to 5-7 primary nodes.\n"
    "3. Each primary node has 3-4 child nodes for granular detail.\n"
    "4. Expect 21-36 nodes in total.\n\n"
    "Data structure:\n"
    "{\n"
    "  \"nodes\": [\n"
    "    {\n"
    "      \"id\": \"unique-string-id\",\n"
    "      \"name\": \"Node display name\",\n"
    "      \"val\": 30,\n"
    f"      \"category\": \"{_CATEGORY_CHOICES}\",\n"
    "      \"description\": \"Clear, concise description of the concept\"\n"
    "    }\n"
    "  ],\n"
    "  \"links\": [\n"
    "    {\n"
    "      \"source\": \"node-id-1\",\n"
    "      \"target\": \"node-id-2\",\n"
    "      \"value\": 10,\n"
    "      \"label\": \"relationship description\"\n"
    "    }\n"
    "  ]\n"
    "}\n\n"
    "Categorization rules:\n"
    "- Central topic: category \"topic\", val 100. No other node may use val 100.\n"
    "- Primary concepts: category \"concept\", val 70-80.\n"
    "- Sub-concepts: category \"concept\", val 40-60.\n"
    "- Skills and techniques: category \"skill\", val 50-70.\n"
    "- People and authors: category \"person\", val 60-80.\n"
    "- Resources and references: category \"resource\", val 40-60.\n"
    "- Projects and applications: category \"project\", val 50-70.\n\n"
    "Validation rules:\n"
    "- All ids are unique, lowercase, and joined with hyphens (no spaces).\n"
    "- Every link source and target is the id of a node in \"nodes\".\n"
    "- Names are 2-5 words; descriptions are 10-30 words.\n"
    "- val is a number between 10 and 100.\n"
    "- Only use the predefined categories.\n"
    "- Primary nodes must not link back to the central node.\n"
    "- Include at least 30 meaningful links.\n\n"
    "Start your response with { and end it with }. Generate the knowledge graph now."
)


def build_topic_prompt(topic: str) -> str:
    """Build the user message asking for a graph about ``topic``."""
    return (
        f"Generate a comprehensive knowledge graph for: {json.dumps(topic, ensure_ascii=False)}. "
        "Include the central topic, primary concepts, and detailed sub-concepts "
        "with all relationships."
    )
