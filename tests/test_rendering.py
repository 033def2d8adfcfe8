from jinja2 import Template

from flashembed.rendering import render_messages, resolve_renderer
from flashembed.schemas import Message


def test_default_template_renders_escaped_alerts() -> None:
    render = resolve_renderer(None)
    markup = render_messages(
        render,
        [Message(category="info", text="Saved"), Message(category="error", text="<script>")],
    ).decode("utf-8")

    assert '<div class="flash-messages">' in markup
    assert '<div class="alert alert-info">Saved</div>' in markup
    assert '<div class="alert alert-error">&lt;script&gt;</div>' in markup
    assert markup.index("alert-info") < markup.index("alert-error")


def test_custom_template_receives_messages() -> None:
    tmpl = Template("{% for m in messages %}[{{ m.category }}:{{ m.text }}]{% endfor %}")
    markup = render_messages(resolve_renderer(tmpl), [Message(category="a", text="A")])
    assert markup == b"[a:A]"


def test_callable_renderer_may_return_bytes() -> None:
    render = resolve_renderer(lambda msgs: b"|".join(m.text.encode() for m in msgs))
    markup = render_messages(render, [Message(category="a", text="A"), Message(category="b", text="B")])
    assert markup == b"A|B"


def test_render_failure_yields_empty_markup(caplog) -> None:
    def broken(messages):
        raise RuntimeError("boom")

    assert render_messages(broken, [Message(category="a", text="A")]) == b""
    assert "Cannot render 1 flash message(s)" in caplog.text


def test_renderer_returning_non_markup_yields_empty_markup(caplog) -> None:
    assert render_messages(lambda msgs: 3, [Message(category="a", text="A")]) == b""
    assert "Cannot render 1 flash message(s)" in caplog.text
