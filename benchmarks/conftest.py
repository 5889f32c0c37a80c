"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> bytes:
    """Generate a large XML document (~100KB)."""
    sections = []
    for i in range(400):
        sections.append(f"""
  <section id="{i}" title="Section {i}">
    <entry key="name" value="item-{i}"/>
    <entry key="weight" value="{i * 3}"/>
    <text>Paragraph {i} with some &amp; plain text content.</text>
  </section>""")
    return ('<?xml version="1.0" encoding="UTF-8"?>\n<map>' + "".join(sections) + "\n</map>\n").encode()


@pytest.fixture
def small_documents() -> list[bytes]:
    """Many short documents, as produced by per-object config files."""
    return [
        f'<?xml?>\n<object name="obj{i}" x="{i}" y="{i * 2}"/>\n'.encode()
        for i in range(500)
    ]
