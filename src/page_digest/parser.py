from __future__ import annotations
from dataclasses import dataclass
from bs4 import BeautifulSoup
from bs4.builder import builder_registry
from .utils import domain_of

NOISE_TAGS = ["script", "style", "noscript", "template", "svg", "nav", "header", "footer", "aside", "form"]

@dataclass
class Article:
    title: str
    text: str

def _get_text(el) -> str:
    return (el.get_text("\n", strip=True) if el else "").strip()

def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml") if builder_registry.lookup("lxml") else BeautifulSoup(html, "html.parser")

def extract_title(soup: BeautifulSoup, url: str) -> str:
    og = soup.find("meta", attrs={"property": "og:title"})
    if og and (og.get("content") or "").strip():
        return og["content"].strip()
    if soup.title and soup.title.get_text(strip=True):
        return soup.title.get_text(" ", strip=True)
    h1 = soup.find("h1")
    if h1 and h1.get_text(strip=True):
        return h1.get_text(" ", strip=True)
    return domain_of(url)

def extract_article(html: str, url: str = "") -> Article:
    soup = _soup(html)
    # before noise removal, <header> may hold the only <h1>
    title = extract_title(soup, url)

    for tag in soup.find_all(NOISE_TAGS):
        tag.decompose()

    root = soup.find("article") or soup.find("main") or soup.body or soup
    text = _get_text(root)
    return Article(title=title, text=text)
