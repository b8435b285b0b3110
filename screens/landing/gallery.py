# screens/landing/gallery.py
from __future__ import annotations

import streamlit as st

from core.site_content import SiteContent
from store.app_state import AppState

PHOTOS_PER_ROW = 3


def render(state: AppState, site: SiteContent):
    photos = site.gallery
    if not photos:
        return
    st.markdown("## 📸 Campus Gallery")
    for start in range(0, len(photos), PHOTOS_PER_ROW):
        cols = st.columns(PHOTOS_PER_ROW)
        for col, photo in zip(cols, photos[start:start + PHOTOS_PER_ROW]):
            with col:
                caption = f"{photo.title} · {photo.location}" if photo.location else photo.title
                st.image(photo.url, caption=caption, use_container_width=True)
