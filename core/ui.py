# core/ui.py
from __future__ import annotations
import datetime
from html import escape
from typing import Optional

import streamlit as st

from core.site_content import Footer, SiteContent


def _expand(text: str, footer: Footer, name: str, year: Optional[int] = None) -> str:
    year = str(year or datetime.datetime.now().year)
    designer = (footer.designer_name or "").strip()
    return (text or "").replace("{year}", year).replace("{name}", name).replace("{designer_name}", designer)


def _link(label: str, url: str) -> str:
    return f'<a href="{escape(url or "#", quote=True)}" target="_blank" rel="noopener">{escape(label)}</a>'


def footer_html(site: SiteContent, year: Optional[int] = None) -> str:
    """Builds the footer markup; empty string when the footer is disabled or has nothing to show."""
    footer = site.footer
    if not footer.enabled:
        return ""

    footer_text = (footer.footer_text or "").strip()
    if not footer_text and footer.designer_name:
        footer_text = "© {year} • Designed by {designer_name}"
    footer_text = _expand(footer_text, footer, site.name, year)

    links_html = [_link(ln.label.strip(), ln.url.strip()) for ln in footer.links if ln.label.strip()]
    social_html = [_link(ln.label.strip(), ln.url.strip()) for ln in footer.social if ln.label.strip()]

    # Designer badge (if not already in text)
    designer_html = ""
    dn = (footer.designer_name or "").strip()
    du = (footer.designer_url or "").strip()
    if dn and ("Designed by" not in footer_text):
        designer_html = f"• Designed by {_link(dn, du)}" if du else f"• Designed by {escape(dn)}"

    contact = " · ".join(escape(p) for p in (footer.email, footer.phone, footer.address) if p)

    parts = []
    if footer_text:
        parts.append(f"<span>{escape(footer_text)}</span>")
    if contact:
        parts.append(f"<span>{contact}</span>")
    if links_html:
        parts.append(" | ".join(links_html))
    if social_html:
        parts.append(" | ".join(social_html))
    if designer_html:
        parts.append(designer_html)
    if not parts:
        return ""

    return f"""
    <div style="
        margin-top: 2rem;
        padding: 0.75rem 0;
        font-size: 0.9rem;
        color: inherit;
        border-top: 1px solid rgba(0,0,0,0.15);
        opacity: 0.9;
        display:flex; gap:0.75rem; flex-wrap:wrap;
    ">
      {' &nbsp; '.join(parts)}
    </div>
    """


def render_footer_global(site: SiteContent):
    """Render one footer; call this at the end of every page."""
    if site.footer.about:
        st.caption(site.footer.about)
    html = footer_html(site)
    if html:
        st.markdown(html, unsafe_allow_html=True)
