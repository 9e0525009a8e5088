"""Test fixtures: Amazon search result markup builders."""

from __future__ import annotations

import pytest

_MISSING = object()


def _result_item(
    asin: str,
    title=_MISSING,
    rating=_MISSING,
    reviews=_MISSING,
    image=_MISSING,
) -> str:
    title = f"Product {asin}" if title is _MISSING else title
    rating = "4.5 out of 5 stars" if rating is _MISSING else rating
    reviews = "1,234" if reviews is _MISSING else reviews
    image = f"https://m.media-amazon.com/images/I/{asin}.jpg" if image is _MISSING else image

    parts = [f'<div data-component-type="s-search-result" data-asin="{asin}">']
    if image is not None:
        parts.append(
            '<div class="s-product-image-container">'
            f'<img class="s-image" src="{image}" alt=""></div>'
        )
    if title is not None:
        parts.append(
            '<h2 class="a-size-mini"><a class="a-link-normal" href="/dp/'
            f'{asin}"><span class="a-text-normal">{title}</span></a></h2>'
        )
    parts.append('<div class="a-row a-size-small">')
    if rating is not None:
        parts.append(
            f'<span aria-label="{rating}"><i class="a-icon a-icon-star-small">'
            f'<span class="a-icon-alt">{rating}</span></i></span>'
        )
    if reviews is not None:
        parts.append(
            f'<span aria-label="{reviews} ratings">'
            f'<span class="a-size-base s-underline-text">{reviews}</span></span>'
        )
    parts.append("</div></div>")
    return "".join(parts)


def _search_page(*items: str) -> str:
    return (
        "<html><head><title>Amazon.com : usb charger</title></head><body>"
        '<div class="s-main-slot s-result-list">'
        '<div data-component-type="s-impression-logger">sponsored banner</div>'
        + "".join(items)
        + "</div></body></html>"
    )


@pytest.fixture()
def result_item():
    return _result_item


@pytest.fixture()
def search_page():
    return _search_page


@pytest.fixture()
def search_html() -> str:
    return _search_page(
        _result_item("B0001", title="Anker USB C Charger 20W", rating="4.7 out of 5 stars",
                     reviews="98,765"),
        _result_item("B0002", title="  Apple 20W USB-C Power Adapter  ", rating=None),
        _result_item("B0003", title="Generic Wall Charger", reviews=None, image=None),
    )
