from site_builder.models.schema import Section, WebsiteSchema, resolve_home_page


def test_null_props_become_empty_dict():
    section = Section.model_validate({"id": "sec-hero-1", "type": "hero", "props": None})

    assert section.props == {}


def test_unknown_keys_survive_round_trip():
    raw = {
        "website": {
            "name": "Acme",
            "theme": "dark",
            "pages": [{"slug": "blog", "title": "Blog", "sections": [], "hidden": True}],
        }
    }

    schema = WebsiteSchema.model_validate(raw)

    dumped = schema.to_json_dict()
    assert dumped["website"]["theme"] == "dark"
    assert dumped["website"]["pages"][0]["hidden"] is True
    assert dumped["website"]["colors"] == {"primary": "#3b82f6", "secondary": "#0f172a"}
    assert resolve_home_page(schema).slug == "blog"
