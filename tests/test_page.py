from bs4 import BeautifulSoup

from simple_component.component import Component
from simple_component.page import render_page


def test_render_page_wraps_fragments():
    card = Component("div").add_class("card").add_content("Hi & bye")
    html_text = render_page([card, "<hr>"], title="Cards")

    assert html_text.startswith("<!DOCTYPE html>\n")
    soup = BeautifulSoup(html_text, "html.parser")
    assert soup.title.get_text() == "Cards"
    assert soup.html["lang"] == "en"
    div = soup.body.find("div", class_="card")
    assert div is not None
    assert div.get_text(strip=True) == "Hi & bye"
    assert soup.body.find("hr") is not None


def test_render_page_escapes_title():
    html_text = render_page([], title="<b>Bold</b>", lang="fr")
    assert "<title>&lt;b&gt;Bold&lt;/b&gt;</title>" in html_text
    assert '<html lang="fr">' in html_text


def test_rendered_attributes_parse_back():
    comp = (
        Component("a")
        .set_attribute("href", "/search?q=a&b")
        .set_attribute("title", 'say "hi"')
        .set_attribute("download")
        .add_content("link")
    )
    soup = BeautifulSoup(comp.render(), "html.parser")
    link = soup.find("a")
    assert link["href"] == "/search?q=a&b"
    assert link["title"] == 'say "hi"'
    assert link.has_attr("download")
