"""
Unit tests for directory-index parsing.
"""
from bs4 import BeautifulSoup

from helpers import BASE, index_page
from target_matrix.listing import fetch_subdirectories, list_subdirectories


def test_only_trailing_slash_entries_in_page_order():
    soup = BeautifulSoup(index_page("ramips/", "armsr/", "config.buildinfo", "x86/"), "html.parser")
    assert list_subdirectories(soup) == ["ramips", "armsr", "x86"]


def test_parent_link_and_file_rows_skipped():
    soup = BeautifulSoup(index_page("profiles.json", "sha256sums.sig"), "html.parser")
    assert list_subdirectories(soup) == []


def test_duplicates_are_kept():
    soup = BeautifulSoup(index_page("mt7621/", "mt7621/"), "html.parser")
    assert list_subdirectories(soup) == ["mt7621", "mt7621"]


def test_anchors_outside_name_cells_ignored():
    html = """
    <html><body>
      <a href="elsewhere/">nav</a>
      <table>
        <tr><td class="n"><a href="generic/">generic</a>/</td></tr>
        <tr><td class="s"><a href="size/">size</a></td></tr>
        <tr><td class="n"><a>no href</a></td></tr>
      </table>
    </body></html>
    """
    soup = BeautifulSoup(html, "html.parser")
    assert list_subdirectories(soup) == ["generic"]


def test_fetch_subdirectories_uses_given_url(make_fetcher):
    url = f"{BASE}/releases/24.10.0/targets/mediatek/"
    fetcher = make_fetcher({url: index_page("filogic/", "mt7622/")})
    assert fetch_subdirectories(fetcher, url) == ["filogic", "mt7622"]
