"""Shared fixtures: a small blog site with posts, pages and a settings file collection."""

import pytest

from cmsindex.config import SiteConfig
from cmsindex.models import Entry
from cmsindex.state import AppContext

SITE = {
    "site_url": "https://example.com",
    "media_folder": "static/img",
    "public_folder": "/img",
    "i18n": {
        "structure": "multiple_files",
        "locales": ["en", "fr"],
        "default_locale": "fr",
    },
    "collections": [
        {
            "name": "posts",
            "folder": "content/posts",
            "i18n": True,
            "fields": [
                {"name": "title", "widget": "string"},
                {"name": "cover", "widget": "image"},
                {
                    "name": "authors",
                    "widget": "list",
                    "field": {"name": "name", "widget": "string"},
                },
                {
                    "name": "gallery",
                    "widget": "list",
                    "fields": [
                        {"name": "src", "widget": "image"},
                        {"name": "alt", "widget": "string"},
                    ],
                },
                {
                    "name": "blocks",
                    "widget": "list",
                    "typeKey": "type",
                    "types": [
                        {
                            "name": "image",
                            "widget": "file",
                            "fields": [
                                {"name": "src", "widget": "image"},
                                {"name": "caption", "widget": "string"},
                            ],
                        },
                        {"name": "text", "widget": "string"},
                    ],
                },
            ],
        },
        {
            "name": "news",
            "folder": "content/posts",
            "filter": {"field": "kind", "value": "news"},
            "fields": [
                {"name": "title", "widget": "string"},
                {"name": "kind", "widget": "string"},
            ],
        },
        {
            "name": "settings",
            "files": [
                {
                    "name": "general",
                    "file": "data/general.json",
                    "fields": [
                        {"name": "logo", "widget": "image"},
                        {"name": "site_name", "widget": "string"},
                    ],
                },
            ],
        },
    ],
}


@pytest.fixture
def site_config():
    return SiteConfig.from_dict(SITE)


@pytest.fixture
def entries():
    return [
        Entry(
            id="post-1",
            slug="hello",
            collectionName="posts",
            locales={
                "en": {"content": {"title": "Hello", "cover": "/img/a.png"}},
                "fr": {"content": {"title": "Bonjour", "cover": "/img/a.png"}},
            },
        ),
        Entry(
            id="post-2",
            slug="blocks",
            collectionName="posts",
            locales={
                "en": {
                    "content": {
                        "title": "Blocks",
                        "blocks": [
                            {"type": "text", "text": "intro"},
                            {"type": "image", "src": "b.png", "caption": "B"},
                        ],
                    }
                },
            },
        ),
        Entry(
            id="news-1",
            slug="launch",
            collectionName="news",
            locales={"default": {"content": {"title": "Launch", "kind": "news"}}},
        ),
        Entry(
            id="news-2",
            slug="notes",
            collectionName="news",
            locales={"default": {"content": {"title": "Notes", "kind": "memo"}}},
        ),
        Entry(
            id="settings-general",
            collectionName="settings",
            fileName="general",
            locales={
                "default": {"content": {"logo": "a.png", "site_name": "Example"}}
            },
        ),
    ]


@pytest.fixture
def app(site_config, entries):
    ctx = AppContext(config=site_config)
    ctx.load(entries)
    return ctx
