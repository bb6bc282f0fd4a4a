#!/usr/bin/env python3
"""
HTML to markdown conversion for docs.rs and crates.io pages.
"""

import re
from typing import List

from bs4 import BeautifulSoup, NavigableString, Tag

# Page chrome that carries no documentation
STRIP_TAGS = ['script', 'style', 'noscript', 'nav', 'header', 'footer', 'svg', 'form']

HEADINGS = {'h1', 'h2', 'h3', 'h4', 'h5', 'h6'}
BLOCKS = {'p', 'div', 'section', 'article', 'main', 'body', 'table', 'tr', 'details', 'summary', 'dl', 'dt', 'dd'}


def html_to_markdown(html: str) -> str:
    """
    Convert an HTML document or fragment to markdown.

    Args:
        html: Raw HTML text

    Returns:
        Markdown text with no HTML tags left in it
    """
    soup = BeautifulSoup(html, 'html.parser')

    for tag in soup.find_all(STRIP_TAGS):
        tag.decompose()

    root = soup.find('main') or soup.body or soup
    parts: List[str] = []
    _render(root, parts)

    markdown = "".join(parts)
    markdown = re.sub(r'[ \t]+\n', '\n', markdown)
    markdown = re.sub(r'\n{3,}', '\n\n', markdown)
    return markdown.strip() + "\n" if markdown.strip() else ""


def _render(node, parts: List[str]) -> None:
    for child in node.children:
        if isinstance(child, NavigableString):
            if child.__class__ is NavigableString:
                text = re.sub(r'\s+', ' ', str(child))
                if text.strip() or (parts and not parts[-1].endswith((' ', '\n'))):
                    parts.append(text)
            continue
        if not isinstance(child, Tag):
            continue

        name = child.name
        if name in HEADINGS:
            level = int(name[1])
            parts.append(f"\n\n{'#' * level} {child.get_text(' ', strip=True)}\n\n")
        elif name == 'pre':
            code = child.get_text().strip('\n')
            parts.append(f"\n\n```rust\n{code}\n```\n\n")
        elif name == 'code':
            parts.append(f"`{child.get_text()}`")
        elif name in ('ul', 'ol'):
            parts.append("\n\n")
            for index, li in enumerate(child.find_all('li', recursive=False), start=1):
                marker = '-' if name == 'ul' else f"{index}."
                li_text = li.get_text(' ', strip=True)
                if li_text:
                    parts.append(f"{marker} {li_text}\n")
            parts.append("\n")
        elif name == 'a':
            text = child.get_text(' ', strip=True)
            href = child.get('href')
            if text and href and not href.startswith('#'):
                parts.append(f"[{text}]({href})")
            elif text:
                parts.append(text)
        elif name in ('strong', 'b'):
            text = child.get_text(' ', strip=True)
            if text:
                parts.append(f"**{text}**")
        elif name in ('em', 'i'):
            text = child.get_text(' ', strip=True)
            if text:
                parts.append(f"*{text}*")
        elif name == 'br':
            parts.append("\n")
        elif name in ('td', 'th'):
            _render(child, parts)
            parts.append(" | ")
        elif name in BLOCKS:
            parts.append("\n\n")
            _render(child, parts)
            parts.append("\n\n")
        else:
            _render(child, parts)
