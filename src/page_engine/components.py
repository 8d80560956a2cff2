"""
Built-in Components
Constructors turning block props into Node trees
"""

from typing import Any

from .types import Node, h


def _text(props: dict[str, Any], *keys: str, default: str = "") -> str:
    """First non-empty prop among keys."""
    for key in keys:
        value = props.get(key)
        if value:
            return str(value)
    return default


def _links(raw: Any) -> list[dict[str, str]]:
    """Normalize links given as strings or {text, href} objects."""
    links = []
    for item in raw or []:
        if isinstance(item, str):
            links.append({"text": item, "href": "#"})
        else:
            links.append({"text": str(item.get("text", "")), "href": str(item.get("href", "#"))})
    return links


# ============================================================================
# Basic elements
# ============================================================================


def heading(props: dict[str, Any]) -> Node:
    level = int(props.get("level", 1))
    if not 1 <= level <= 6:
        raise ValueError(f"Heading level must be 1-6, got {level}")
    return h(f"h{level}", {}, _text(props, "text", "title", "content", "children"))


def paragraph(props: dict[str, Any]) -> Node:
    return h("p", {}, _text(props, "text", "content", "children"))


def text(props: dict[str, Any]) -> Node:
    return h("div", {"class": "text"}, _text(props, "text", "title", "content"))


def button(props: dict[str, Any]) -> Node:
    attrs = {"type": props.get("type", "button"), "variant": props.get("variant", "primary")}
    return h("button", attrs, _text(props, "text", "label", "content", default="Button"))


def link(props: dict[str, Any]) -> Node:
    return h("a", {"href": props.get("href", "#")}, _text(props, "text", "content", "href"))


def image(props: dict[str, Any]) -> Node:
    return h("img", {"src": props.get("src", ""), "alt": props.get("alt", "")})


def list_(props: dict[str, Any]) -> Node:
    items = props.get("items")
    if items is None:
        content = _text(props, "content")
        items = [line.lstrip("• ").strip() for line in content.splitlines() if line.strip()]
    tag = "ol" if props.get("ordered") else "ul"
    return h(tag, {}, [h("li", {}, item) for item in items])


def divider(props: dict[str, Any]) -> Node:
    return h("hr", {})


def spacer(props: dict[str, Any]) -> Node:
    return h("div", {"class": "spacer", "height": props.get("height", 32)})


# ============================================================================
# Containers
# ============================================================================


def card(props: dict[str, Any]) -> Node:
    return h(
        "article",
        {"class": "card"},
        h("h3", {}, _text(props, "title")) if props.get("title") else None,
        h("p", {}, _text(props, "text", "description", "content")),
    )


def section(props: dict[str, Any]) -> Node:
    return h("section", {}, _text(props, "title", "text", "content"))


def container(props: dict[str, Any]) -> Node:
    return h("div", {"class": "container"}, _text(props, "text", "content"))


def grid(props: dict[str, Any]) -> Node:
    columns = int(props.get("columns", 3))
    items = props.get("items", [])
    return h("div", {"class": "grid", "columns": columns}, [h("div", {}, item) for item in items])


def cards(props: dict[str, Any]) -> Node:
    items = props.get("items", [])
    return h(
        "div",
        {"class": "cards", "columns": int(props.get("columns", 3))},
        [card(item if isinstance(item, dict) else {"title": item}) for item in items],
    )


# ============================================================================
# Page sections
# ============================================================================


def hero(props: dict[str, Any]) -> Node:
    attrs: dict[str, Any] = {"class": "hero"}
    if props.get("backgroundImage"):
        attrs["backgroundImage"] = props["backgroundImage"]
    return h(
        "div",
        attrs,
        h("h1", {}, _text(props, "title", "text", "content")),
        h("p", {}, props["subtitle"]) if props.get("subtitle") else None,
    )


def navbar(props: dict[str, Any]) -> Node:
    return h(
        "nav",
        {},
        h("div", {"class": "brand"}, _text(props, "brand")),
        [h("a", {"href": item["href"]}, item["text"]) for item in _links(props.get("links"))],
    )


def footer(props: dict[str, Any]) -> Node:
    return h(
        "footer",
        {},
        h("div", {}, _text(props, "copyright", "text", "content")),
        [h("a", {"href": item["href"]}, item["text"]) for item in _links(props.get("links"))],
    )


def form(props: dict[str, Any]) -> Node:
    fields = []
    for raw in props.get("fields", []):
        field = {"name": raw, "type": "text", "label": raw.capitalize()} if isinstance(raw, str) else raw
        control = textarea if field.get("type") == "textarea" else input_
        fields.append(
            h(
                "div",
                {},
                h("label", {"for": field["name"]}, field.get("label", field["name"])),
                control({"name": field["name"], "type": field.get("type", "text"),
                         "required": field.get("required", False)}),
            )
        )
    return h("form", {}, fields, h("button", {"type": "submit"}, _text(props, "submitText", default="Send")))


def gallery(props: dict[str, Any]) -> Node:
    images = props.get("images", [])
    return h(
        "div",
        {"class": "gallery", "columns": int(props.get("columns", 3))},
        [
            h(
                "figure",
                {},
                h("img", {"src": img.get("src", ""), "alt": img.get("alt", "")}),
                h("figcaption", {}, img["caption"]) if img.get("caption") else None,
            )
            for img in images
        ],
    )


def testimonial(props: dict[str, Any]) -> Node:
    author = _text(props, "author")
    return h(
        "article",
        {"class": "testimonial"},
        h("blockquote", {}, f'"{_text(props, "quote")}"'),
        h("img", {"src": props["avatar"], "alt": author}) if props.get("avatar") else None,
        h("p", {}, author),
    )


def pricing(props: dict[str, Any]) -> Node:
    plans = []
    for plan in props.get("plans", []):
        plans.append(
            h(
                "article",
                {"class": "plan", "popular": bool(plan.get("popular"))},
                h("h3", {}, plan["name"]),
                h("div", {"class": "price"}, plan["price"]),
                h("ul", {}, [h("li", {}, feature) for feature in plan.get("features", [])]),
                h("button", {}, "Choose plan"),
            )
        )
    return h("div", {"class": "pricing"}, plans)


def cta(props: dict[str, Any]) -> Node:
    return h(
        "div",
        {"class": "cta"},
        h("p", {}, _text(props, "text", "title", "content")),
        h("button", {}, props["buttonText"]) if props.get("buttonText") else None,
    )


def search(props: dict[str, Any]) -> Node:
    return h("input", {"type": "search", "placeholder": props.get("placeholder", "Search...")})


def product_card(props: dict[str, Any]) -> Node:
    return h(
        "article",
        {"class": "product"},
        h("img", {"src": props["image"], "alt": _text(props, "title")}) if props.get("image") else None,
        h("h3", {}, _text(props, "title", "text", "content")),
        h("div", {"class": "price"}, props["price"]) if props.get("price") else None,
    )


def product_grid(props: dict[str, Any]) -> Node:
    products = props.get("products", [])
    return h(
        "div",
        {"class": "products", "columns": int(props.get("columns", 4))},
        [product_card(product) for product in products],
    )


# ============================================================================
# Form controls & feedback
# ============================================================================


def input_(props: dict[str, Any]) -> Node:
    return h(
        "input",
        {
            "name": props.get("name", ""),
            "type": props.get("type", "text"),
            "placeholder": props.get("placeholder", ""),
            "required": bool(props.get("required", False)),
        },
    )


def textarea(props: dict[str, Any]) -> Node:
    return h(
        "textarea",
        {"name": props.get("name", ""), "required": bool(props.get("required", False))},
        _text(props, "value"),
    )


def alert(props: dict[str, Any]) -> Node:
    return h(
        "div",
        {"role": "alert", "type": props.get("type", "info")},
        h("strong", {}, props["title"]) if props.get("title") else None,
        _text(props, "text", "description", "content"),
    )


def progress(props: dict[str, Any]) -> Node:
    value = float(props.get("value", 0))
    if not 0 <= value <= 100:
        raise ValueError(f"Progress value must be 0-100, got {value}")
    return h("progress", {"value": value, "max": 100})


def table(props: dict[str, Any]) -> Node:
    columns = props.get("columns", [])
    rows = props.get("rows", [])
    return h(
        "table",
        {},
        h("thead", {}, h("tr", {}, [h("th", {}, column) for column in columns])),
        h("tbody", {}, [h("tr", {}, [h("td", {}, cell) for cell in row]) for row in rows]),
    )


BUILTIN_COMPONENTS = {
    # Basic elements
    "ui.heading": heading,
    "ui.header": heading,
    "ui.paragraph": paragraph,
    "ui.text": text,
    "ui.button": button,
    "ui.link": link,
    "ui.image": image,
    "ui.list": list_,
    "ui.divider": divider,
    "ui.separator": divider,
    "ui.spacer": spacer,
    # Containers
    "ui.card": card,
    "ui.cards": cards,
    "ui.section": section,
    "ui.container": container,
    "ui.grid": grid,
    # Page sections
    "ui.hero": hero,
    "ui.navbar": navbar,
    "ui.footer": footer,
    "ui.form": form,
    "ui.gallery": gallery,
    "ui.imageGallery": gallery,
    "ui.testimonial": testimonial,
    "ui.pricing": pricing,
    "ui.cta": cta,
    "ui.search": search,
    "ui.productCard": product_card,
    "ui.productGrid": product_grid,
    # Form controls & feedback
    "ui.input": input_,
    "ui.textarea": textarea,
    "ui.alert": alert,
    "ui.progress": progress,
    "ui.table": table,
    # Upstream aliases
    "Hero": hero,
    "ContactForm": form,
    "Navigation": navbar,
    "Footer": footer,
    "Gallery": gallery,
    "Testimonial": testimonial,
    "Pricing": pricing,
    "Button": button,
    "Card": card,
    "Input": input_,
    "Textarea": textarea,
    "Heading": heading,
    "Paragraph": paragraph,
    "Image": image,
    "Link": link,
    "List": list_,
}
