from services.validation import HEADER_SETTING_KEYS, normalize_header_settings, validate_header_settings


def test_normalize_maps_camel_case():
    settings = normalize_header_settings({'logoPosition': 'header-left', 'logoSize': 'large', 'extra': 1})
    assert settings['logo_position'] == 'header-left'
    assert settings['logo_size'] == 'large'
    assert settings['title_position'] is None
    assert set(settings) == set(HEADER_SETTING_KEYS)


def test_normalize_snake_case_wins():
    settings = normalize_header_settings({'logoSize': 'small', 'logo_size': 'large'})
    assert settings['logo_size'] == 'large'


def test_normalize_none_payload():
    assert normalize_header_settings(None) == {key: None for key in HEADER_SETTING_KEYS}


def test_valid_payload(header_settings):
    assert validate_header_settings(header_settings) == []


def test_unknown_vocabulary_is_not_an_error():
    assert validate_header_settings({'logo_position': 'floating', 'logo_size': 'gigantic'}) == []


def test_non_object_payload():
    assert validate_header_settings(['header-left']) == ["payload must be a JSON object"]


def test_type_errors():
    errors = validate_header_settings({'logoSize': 3, 'catalogName': ['x'], 'logoUrl': {}})
    assert "logo_size must be a string" in errors
    assert "catalog_name must be a string" in errors
    assert "logo_url must be a string" in errors


def test_length_limits():
    errors = validate_header_settings({
        'title_position': 'x' * 51,
        'catalog_name': 'n' * 121,
        'logo_url': 'https://x.com/' + 'a' * 2048,
    })
    assert "title_position exceeds 50 characters" in errors
    assert "catalog_name exceeds 120 characters" in errors
    assert "logo_url exceeds 2048 characters" in errors


def test_primary_color():
    assert validate_header_settings({'primary_color': '#A1b2C3'}) == []
    assert validate_header_settings({'primary_color': 'red'}) == ["primary_color must be #RRGGBB: red"]
    assert validate_header_settings({'primary_color': '#fff'}) != []


def test_primary_color_rejects_trailing_newline():
    errors = validate_header_settings({'primary_color': '#4f46e5\n'})
    assert len(errors) == 1
    assert errors[0].startswith("primary_color must be #RRGGBB")


def test_background_settings():
    settings = normalize_header_settings({'backgroundImage': 'https://x.com/bg.png', 'background_color': '#fff'})
    assert settings['background_image'] == 'https://x.com/bg.png'
    assert settings['background_color'] == '#fff'

    errors = validate_header_settings({'backgroundGradient': 5, 'background_image_fit': 'c' * 21})
    assert "background_gradient must be a string" in errors
    assert "background_image_fit exceeds 20 characters" in errors
