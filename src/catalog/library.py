"""
Element Library
Built-in templates for the component ids emitted by the matching pipeline
"""

from .models import ElementCategory, ElementTemplate


CARD_STYLE = {
    "backgroundColor": "white",
    "border": "1px solid #e5e7eb",
    "borderRadius": "8px",
    "padding": "20px",
    "boxShadow": "0 1px 3px rgba(0, 0, 0, 0.1)",
}

PANEL_STYLE = {
    "backgroundColor": "#f9fafb",
    "border": "1px solid #e5e7eb",
    "borderRadius": "8px",
    "padding": "20px",
}

DARK_BAR_STYLE = {
    "backgroundColor": "#1f2937",
    "color": "white",
    "padding": "16px",
}


BUILTIN_TEMPLATES: list[ElementTemplate] = [
    # Full-bleed page chrome
    ElementTemplate(
        component_id="ui.header",
        visual_kind="header",
        category=ElementCategory.NAVIGATION,
        name="Page header",
        description="Top bar with brand and title",
        icon="📝",
        default_width=1200,
        default_height=80,
        default_content="Page title",
        default_props={"level": 1},
        default_style={**DARK_BAR_STYLE, "fontSize": "28px", "fontWeight": "bold"},
    ),
    ElementTemplate(
        component_id="ui.navbar",
        visual_kind="navbar",
        category=ElementCategory.NAVIGATION,
        name="Navigation",
        description="Navigation bar",
        icon="🧭",
        default_width=600,
        default_height=50,
        default_content="Home | About | Services | Contact",
        default_props={"links": ["Home", "About", "Services", "Contact"]},
        default_style={**DARK_BAR_STYLE, "padding": "12px", "display": "flex", "alignItems": "center", "gap": "24px"},
    ),
    ElementTemplate(
        component_id="ui.hero",
        visual_kind="hero",
        category=ElementCategory.BASIC,
        name="Hero banner",
        description="Main page banner",
        icon="🎯",
        default_width=600,
        default_height=200,
        default_content="Welcome!",
        default_props={"variant": "hero"},
        default_style={
            "background": "linear-gradient(135deg, #667eea 0%, #764ba2 100%)",
            "color": "white",
            "textAlign": "center",
            "padding": "40px 20px",
            "borderRadius": "12px",
        },
    ),
    ElementTemplate(
        component_id="ui.footer",
        visual_kind="footer",
        category=ElementCategory.NAVIGATION,
        name="Footer",
        description="Site footer",
        icon="🦶",
        default_width=600,
        default_height=60,
        default_content="© Your company. All rights reserved.",
        default_style={**DARK_BAR_STYLE, "textAlign": "center", "fontSize": "14px"},
    ),
    # Basic
    ElementTemplate(
        component_id="ui.heading",
        visual_kind="heading",
        category=ElementCategory.BASIC,
        name="Heading",
        description="Section heading",
        icon="📝",
        default_width=400,
        default_height=40,
        default_content="Heading",
        default_props={"level": 2},
        default_style={"fontSize": "24px", "fontWeight": "bold", "color": "#1f2937", "marginBottom": "16px"},
    ),
    ElementTemplate(
        component_id="ui.text",
        visual_kind="text",
        category=ElementCategory.BASIC,
        name="Text",
        description="Text block",
        icon="📄",
        default_width=500,
        default_height=80,
        default_content="Describe your product or service",
        default_style={"fontSize": "16px", "lineHeight": "1.6", "color": "#374151", "padding": "16px"},
    ),
    ElementTemplate(
        component_id="ui.button",
        visual_kind="button",
        category=ElementCategory.BASIC,
        name="Button",
        description="Action button",
        icon="🔘",
        default_width=150,
        default_height=50,
        default_content="Learn more",
        default_props={"variant": "primary"},
        default_style={
            "backgroundColor": "#3b82f6",
            "color": "white",
            "border": "none",
            "borderRadius": "8px",
            "padding": "12px 24px",
            "fontSize": "16px",
            "cursor": "pointer",
        },
    ),
    ElementTemplate(
        component_id="ui.cta",
        visual_kind="cta",
        category=ElementCategory.BASIC,
        name="Call to action",
        description="Call to action block",
        icon="📢",
        default_width=400,
        default_height=80,
        default_content="Get started today!",
        default_props={"variant": "cta"},
        default_style={
            "backgroundColor": "#fef3c7",
            "border": "2px solid #f59e0b",
            "borderRadius": "8px",
            "padding": "16px",
            "textAlign": "center",
            "fontWeight": "bold",
        },
    ),
    # Forms
    ElementTemplate(
        component_id="ui.search",
        visual_kind="search",
        category=ElementCategory.FORMS,
        name="Search",
        description="Product search field",
        icon="🔍",
        default_width=300,
        default_height=40,
        default_props={"placeholder": "Search products..."},
        default_style={"border": "2px solid #e5e7eb", "borderRadius": "8px", "padding": "8px 16px"},
    ),
    ElementTemplate(
        component_id="ui.form",
        visual_kind="form",
        category=ElementCategory.FORMS,
        name="Form",
        description="Contact form",
        icon="📝",
        default_width=350,
        default_height=250,
        default_props={"fields": ["name", "email", "message"]},
        default_style=PANEL_STYLE,
    ),
    # Layout
    ElementTemplate(
        component_id="ui.section",
        visual_kind="section",
        category=ElementCategory.LAYOUT,
        name="Section",
        description="Content section",
        icon="📦",
        default_width=600,
        default_height=150,
        default_style={**PANEL_STYLE, "backgroundColor": "#ffffff", "padding": "24px"},
    ),
    ElementTemplate(
        component_id="ui.container",
        visual_kind="container",
        category=ElementCategory.LAYOUT,
        name="Container",
        description="Generic container",
        icon="📦",
        default_width=600,
        default_height=200,
        default_style={**PANEL_STYLE, "border": "2px dashed #d1d5db"},
    ),
    ElementTemplate(
        component_id="ui.grid",
        visual_kind="grid",
        category=ElementCategory.LAYOUT,
        name="Grid",
        description="Grid container",
        icon="⊞",
        default_width=500,
        default_height=150,
        default_props={"columns": 3},
        default_style={"display": "grid", "gridTemplateColumns": "repeat(3, 1fr)", "gap": "16px"},
    ),
    # Content
    ElementTemplate(
        component_id="ui.card",
        visual_kind="card",
        category=ElementCategory.CONTENT,
        name="Card",
        description="Content card",
        icon="🃏",
        default_width=300,
        default_height=200,
        default_content="Card title\n\nCard description",
        default_style=CARD_STYLE,
    ),
    ElementTemplate(
        component_id="ui.cards",
        visual_kind="cards",
        category=ElementCategory.CONTENT,
        name="Card grid",
        description="Grid of cards",
        icon="🃏",
        default_width=600,
        default_height=200,
        default_props={"columns": 3},
        default_style={"display": "grid", "gridTemplateColumns": "repeat(3, 1fr)", "gap": "16px"},
    ),
    ElementTemplate(
        component_id="ui.productCard",
        visual_kind="productCard",
        category=ElementCategory.CONTENT,
        name="Product card",
        description="Single product",
        icon="🛍️",
        default_width=250,
        default_height=350,
        default_content="Product name\n\nProduct description\n\nPrice: $10",
        default_props={"price": "$10"},
        default_style={**CARD_STYLE, "padding": "16px"},
    ),
    ElementTemplate(
        component_id="ui.productGrid",
        visual_kind="productGrid",
        category=ElementCategory.CONTENT,
        name="Product grid",
        description="Grid of products",
        icon="🛍️",
        default_width=600,
        default_height=300,
        default_props={"columns": 4},
        default_style={"display": "grid", "gridTemplateColumns": "repeat(4, 1fr)", "gap": "16px"},
    ),
    ElementTemplate(
        component_id="ui.list",
        visual_kind="list",
        category=ElementCategory.CONTENT,
        name="List",
        description="Bulleted list",
        icon="📋",
        default_width=300,
        default_height=100,
        default_content="• Item 1\n• Item 2\n• Item 3",
        default_props={"type": "ul"},
        default_style=CARD_STYLE,
    ),
    # Media
    ElementTemplate(
        component_id="ui.image",
        visual_kind="image",
        category=ElementCategory.MEDIA,
        name="Image",
        description="Image placeholder",
        icon="🖼️",
        default_width=300,
        default_height=200,
        default_props={"src": "", "alt": "Image"},
        default_style={"backgroundColor": "#f3f4f6", "border": "2px dashed #d1d5db", "borderRadius": "8px"},
    ),
    ElementTemplate(
        component_id="ui.imageGallery",
        visual_kind="gallery",
        category=ElementCategory.MEDIA,
        name="Gallery",
        description="Image gallery",
        icon="🖼️",
        default_width=500,
        default_height=250,
        default_props={"columns": 3},
        default_style={"display": "grid", "gridTemplateColumns": "repeat(3, 1fr)", "gap": "8px"},
    ),
    # Data
    ElementTemplate(
        component_id="ui.table",
        visual_kind="table",
        category=ElementCategory.DATA,
        name="Table",
        description="Data table",
        icon="📊",
        default_width=500,
        default_height=150,
        default_props={"columns": [], "rows": []},
        default_style={"border": "1px solid #e5e7eb", "borderCollapse": "collapse"},
    ),
    ElementTemplate(
        component_id="ui.chart",
        visual_kind="chart",
        category=ElementCategory.DATA,
        name="Chart",
        description="Bar chart",
        icon="📈",
        default_width=400,
        default_height=250,
        default_props={"type": "bar", "data": []},
        default_style=PANEL_STYLE,
    ),
    # Feedback
    ElementTemplate(
        component_id="ui.alert",
        visual_kind="alert",
        category=ElementCategory.FEEDBACK,
        name="Alert",
        description="Status message",
        icon="💬",
        default_width=350,
        default_height=60,
        default_props={"type": "info"},
        default_style={"backgroundColor": "#eff6ff", "border": "1px solid #3b82f6", "borderRadius": "8px"},
    ),
    ElementTemplate(
        component_id="ui.progress",
        visual_kind="progress",
        category=ElementCategory.FEEDBACK,
        name="Progress bar",
        description="Progress indicator",
        icon="⏳",
        default_width=300,
        default_height=20,
        default_props={"value": 0},
        default_style={"backgroundColor": "#e5e7eb", "borderRadius": "10px"},
    ),
]


# One generic box per category, used to complete partial catalog entries
CATEGORY_DEFAULTS: dict[ElementCategory, ElementTemplate] = {
    ElementCategory.BASIC: ElementTemplate(
        component_id="default.basic", visual_kind="text", category=ElementCategory.BASIC,
        name="Text", icon="📄", default_width=400, default_height=100,
    ),
    ElementCategory.FORMS: ElementTemplate(
        component_id="default.forms", visual_kind="input", category=ElementCategory.FORMS,
        name="Input", icon="📝", default_width=250, default_height=40,
        default_props={"type": "text"},
    ),
    ElementCategory.NAVIGATION: ElementTemplate(
        component_id="default.navigation", visual_kind="breadcrumb", category=ElementCategory.NAVIGATION,
        name="Breadcrumb", icon="🧭", default_width=300, default_height=30,
    ),
    ElementCategory.MEDIA: ElementTemplate(
        component_id="default.media", visual_kind="image", category=ElementCategory.MEDIA,
        name="Image", icon="🖼️", default_width=300, default_height=200,
    ),
    ElementCategory.CONTENT: ElementTemplate(
        component_id="default.content", visual_kind="card", category=ElementCategory.CONTENT,
        name="Card", icon="🃏", default_width=300, default_height=200, default_style=CARD_STYLE,
    ),
    ElementCategory.LAYOUT: ElementTemplate(
        component_id="default.layout", visual_kind="container", category=ElementCategory.LAYOUT,
        name="Container", icon="📦", default_width=600, default_height=300, default_style=PANEL_STYLE,
    ),
    ElementCategory.DATA: ElementTemplate(
        component_id="default.data", visual_kind="table", category=ElementCategory.DATA,
        name="Table", icon="📊", default_width=500, default_height=150,
    ),
    ElementCategory.FEEDBACK: ElementTemplate(
        component_id="default.feedback", visual_kind="alert", category=ElementCategory.FEEDBACK,
        name="Alert", icon="💬", default_width=350, default_height=60,
    ),
}
