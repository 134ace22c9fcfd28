from face_quiz.core.hint_renderer import HintRenderer, render_hint_html


def test_blank_hint_renders_nothing():
    assert render_hint_html(None) == ""
    assert render_hint_html("   \n") == ""


def test_renders_inline_markdown():
    assert render_hint_html("**Tall**, wears a *red* scarf") == (
        "<p><strong>Tall</strong>, wears a <em>red</em> scarf</p>"
    )


def test_strikethrough_is_enabled():
    assert "<s>beard</s>" in render_hint_html("~~beard~~ clean shaven")


def test_raw_html_is_escaped_by_default():
    html = render_hint_html("<b>bold</b>")
    assert "<b>" not in html
    assert "&lt;b&gt;" in html


def test_html_can_be_allowed():
    assert "<b>bold</b>" in HintRenderer(enable_html=True).render_fragment("<b>bold</b>")
