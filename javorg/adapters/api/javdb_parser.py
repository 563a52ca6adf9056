"""
Parsing des pages HTML de JavDB.

Deux pages sont exploitees:
- La page de recherche (/search?q=...) : liste de candidats partiels
- La page de detail (/v/<id>) : fiche complete

Les libelles du panneau d'informations existent en chinois (interface par
defaut) et en anglais (locale=en), les deux sont reconnus.
"""

import re
from datetime import date, datetime
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from javorg.core.exceptions import MetadataServiceError
from javorg.core.ports.metadata_service import Candidate, DetailRecord

# Libelles du panneau d'informations -> champ
PANEL_LABELS: dict[str, str] = {
    "番號": "code",
    "ID": "code",
    "日期": "pub_date",
    "Released Date": "pub_date",
    "評分": "score",
    "Rating": "score",
    "類別": "tags",
    "Tags": "tags",
    "演員": "cast",
    "Actor(s)": "cast",
}

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def _text(node: Optional[Tag]) -> str:
    """Texte normalise d'un noeud (espaces insecables et multiples reduits)."""
    if node is None:
        return ""
    return " ".join(node.get_text(" ", strip=True).replace("\xa0", " ").split())


def parse_search_results(html: str) -> list[Candidate]:
    """
    Extrait les candidats d'une page de recherche, dans l'ordre de la page.

    Args:
        html: Contenu HTML de la page de recherche

    Returns:
        Liste de Candidate (vide si la page ne contient aucun resultat)
    """
    soup = BeautifulSoup(html, "html.parser")
    candidates: list[Candidate] = []

    for box in soup.select("div.movie-list div.item a[href]"):
        title_node = box.select_one("div.video-title")
        code_node = title_node.select_one("strong") if title_node else None
        code = _text(code_node).upper()
        if not code:
            continue

        title = box.get("title") or ""
        if not title and title_node is not None:
            title = _text(title_node).removeprefix(_text(code_node)).strip()

        candidates.append(Candidate(code=code, path=box["href"], title=title))

    return candidates


def _panel_values(soup: BeautifulSoup) -> dict[str, Tag]:
    """Associe chaque champ connu au <span class="value"> de son bloc."""
    values: dict[str, Tag] = {}
    for block in soup.select("nav.movie-panel-info div.panel-block"):
        label_node = block.find("strong")
        value_node = block.select_one("span.value")
        if label_node is None or value_node is None:
            continue
        label = _text(label_node).rstrip(":：").strip()
        field = PANEL_LABELS.get(label)
        if field is not None:
            values[field] = value_node
    return values


def parse_score(text: str) -> tuple[float, int]:
    """
    Extrait la note et le nombre de votes (ex: '4.5分, 由10人評價' -> (4.5, 10)).

    Retourne (0.0, 0) pour les valeurs absentes.
    """
    numbers = _NUMBER_RE.findall(text)
    score = float(numbers[0]) if numbers else 0.0
    count = int(float(numbers[1])) if len(numbers) > 1 else 0
    return score, count


def parse_date(text: str) -> Optional[date]:
    """Lit une date AAAA-MM-JJ, None si absente ou invalide."""
    try:
        return datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def _parse_cast(value: Tag) -> tuple[str, ...]:
    """
    Liste les actrices d'un bloc casting.

    Chaque nom est suivi d'un symbole de genre ; seuls les noms marques
    'female' sont retenus. Sans aucun symbole, tous les noms sont retenus.
    """
    names: list[str] = []
    has_symbols = value.select_one("strong.symbol") is not None
    for link in value.find_all("a"):
        name = _text(link)
        if not name:
            continue
        if has_symbols:
            symbol = link.find_next_sibling("strong")
            if symbol is None or "female" not in (symbol.get("class") or []):
                continue
        names.append(name)
    return tuple(names)


def parse_detail(html: str, path: str, base_url: str) -> DetailRecord:
    """
    Extrait la fiche complete d'une page de detail.

    Args:
        html: Contenu HTML de la page de detail
        path: Chemin de reference de la page (ex: '/v/abc12')
        base_url: URL du site, pour resoudre les URL d'image relatives

    Returns:
        DetailRecord

    Raises:
        MetadataServiceError: Si la page ne ressemble pas a une page de detail
            ou si l'URL de couverture est malformee
    """
    soup = BeautifulSoup(html, "html.parser")

    heading = soup.select_one("h2.title")
    title = _text(soup.select_one("h2.title strong.current-title"))
    if heading is None or not title:
        raise MetadataServiceError(f"Page de detail inattendue: {path}")

    values = _panel_values(soup)

    code = _text(values.get("code")).replace(" ", "").upper()
    if not code:
        code = _text(heading.find("strong")).upper()

    score, score_count = parse_score(_text(values.get("score")))

    tags: tuple[str, ...] = ()
    if "tags" in values:
        tags = tuple(name for name in (_text(a) for a in values["tags"].find_all("a")) if name)

    cast = _parse_cast(values["cast"]) if "cast" in values else ()

    cover_url = None
    cover = soup.select_one("img.video-cover")
    if cover is not None and cover.get("src"):
        try:
            cover_url = urljoin(f"{base_url}/", cover["src"])
        except ValueError as e:
            raise MetadataServiceError(f"Page de detail illisible: {path}: {e}") from e

    return DetailRecord(
        path=path,
        code=code,
        title=title,
        tags=tags,
        cast=cast,
        score=score,
        score_count=score_count,
        pub_date=parse_date(_text(values.get("pub_date"))),
        cover_url=cover_url,
    )
