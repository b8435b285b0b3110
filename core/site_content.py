# core/site_content.py
"""Static copy for the public landing page, read from config/site.yaml."""
from __future__ import annotations
import yaml
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel

DEFAULT_SITE_PATH = Path(__file__).resolve().parents[1] / "config" / "site.yaml"

class Stat(BaseModel):
    value: str
    label: str

class Hero(BaseModel):
    badge: str = ""
    title: str
    highlight: str = ""
    subtitle: str = ""
    image: Optional[str] = None
    cta_label: str = "Explore Programs"
    stats: List[Stat] = []

class Achievement(BaseModel):
    icon: str = "🏆"
    value: int
    suffix: str = ""
    label: str
    description: str = ""

class GalleryPhoto(BaseModel):
    url: str
    title: str
    location: str = ""

class FooterLink(BaseModel):
    label: str
    url: str = "#"

class Footer(BaseModel):
    enabled: bool = True
    about: str = ""
    footer_text: str = "© {year} • {name} • All rights reserved"
    email: str = ""
    phone: str = ""
    address: str = ""
    links: List[FooterLink] = []
    social: List[FooterLink] = []
    designer_name: str = ""
    designer_url: str = ""

class SiteContent(BaseModel):
    name: str
    hero: Hero
    achievements: List[Achievement] = []
    gallery: List[GalleryPhoto] = []
    footer: Footer = Footer()

def load_site_content(path: str | Path = DEFAULT_SITE_PATH) -> SiteContent:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return SiteContent(**data)
