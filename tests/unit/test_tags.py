"""Unit tests for tag substitution."""

import logging

from messagearray.models import Message, RenderMode, TagDescriptor
from messagearray.tags import process_tag, process_tags


class PlainSite:
    """Resolver without tag support."""

    def get_message_text(self, message):
        return "plain"

    def get_message_html(self, message):
        return "plain"


class TestSubTag:
    """Test the built-in sub tag."""

    def test_sub_text_mode(self):
        """Test parameter substitution in text mode."""
        message = Message(params={"name": "World"})
        result = process_tags(message, 'Hello [: sub param="name" :]!', RenderMode.TEXT)
        assert result == "Hello World!"

    def test_sub_html_mode(self):
        message = Message(params={"name": "World"})
        result = process_tags(message, 'Hello [: sub param="name" :]!', RenderMode.HTML)
        assert result == "Hello World!"

    def test_sub_escapes_value_in_html_mode(self):
        """Test that &, <, > and double quotes are escaped in HTML mode."""
        message = Message(params={"name": '<b>"Tom" & Jerry\'s</b>'})
        result = process_tags(message, "Hi [: sub param=name :]", RenderMode.HTML)
        assert result == "Hi &lt;b&gt;&quot;Tom&quot; &amp; Jerry's&lt;/b&gt;"

    def test_sub_does_not_escape_in_text_mode(self):
        message = Message(params={"name": "<b>&</b>"})
        result = process_tags(message, "[: sub param=name :]", RenderMode.TEXT)
        assert result == "<b>&</b>"

    def test_sub_converts_values_to_string(self):
        message = Message(params={"count": 3})
        assert process_tags(message, "[:sub param=count:] files", RenderMode.TEXT) == "3 files"

    def test_tag_name_is_case_insensitive(self):
        message = Message(params={"name": "x"})
        assert process_tags(message, "[: SUB param=name :]", RenderMode.TEXT) == "x"

    def test_missing_param_renders_empty_and_logs(self, caplog):
        """Test that a missing param degrades to an empty string."""
        message = Message(params={"other": "x"})

        with caplog.at_level(logging.WARNING, logger="messagearray.tags"):
            result = process_tags(message, "a[: sub param=name :]b", RenderMode.TEXT)

        assert result == "ab"
        assert "do not have param name" in caplog.text

    def test_missing_params_mapping(self, caplog):
        message = Message(text="x")
        with caplog.at_level(logging.WARNING, logger="messagearray.tags"):
            assert process_tags(message, "[: sub param=name :]", RenderMode.HTML) == ""
        assert "do not have param name" in caplog.text

    def test_none_param_value_is_missing(self):
        message = Message(params={"name": None})
        assert process_tags(message, "[: sub param=name :]", RenderMode.TEXT) == ""


class TestTemplateSplitting:
    """Test how templates are split into literals and markers."""

    def test_template_without_tags_is_unchanged(self):
        message = Message()
        assert process_tags(message, "no tags [here] :]", RenderMode.TEXT) == "no tags [here] :]"

    def test_multiple_tags_keep_literal_order(self):
        message = Message(params={"a": "1", "b": "2"})
        template = "<[: sub param=a :]|[: sub param=b :]|[: sub param=a :]>"
        assert process_tags(message, template, RenderMode.TEXT) == "<1|2|1>"

    def test_tag_spanning_newlines(self):
        message = Message(params={"name": "World"})
        template = "Hello [:\n  sub\n  param=\"name\"\n:]!"
        assert process_tags(message, template, RenderMode.TEXT) == "Hello World!"

    def test_markers_are_non_greedy(self):
        message = Message(params={"a": "A"})
        assert process_tags(message, "[:sub param=a:] and [:sub param=a:]", RenderMode.TEXT) == "A and A"


class TestCustomTags:
    """Test delegation of non-built-in tags to the site resolver."""

    def test_unknown_tag_without_site_is_empty(self):
        message = Message()
        assert process_tags(message, "a[: site-title :]b", RenderMode.TEXT) == "ab"

    def test_unknown_tag_with_site_lacking_capability_is_empty(self):
        message = Message(site=PlainSite())
        assert process_tags(message, "a[: site-title :]b", RenderMode.HTML) == "ab"

    def test_unknown_tag_delegated_to_message_site(self, tagging_site):
        """Test that the record's own site processes custom tags."""
        message = Message(site=tagging_site)
        result = process_tags(message, 'x [: Link X="1 2" y=3 :] y', RenderMode.HTML)

        assert result == "x <link|1 2|html> y"
        called_message, tag, mode = tagging_site.calls[0]
        assert called_message is message
        assert tag == TagDescriptor(name="link", atts={"x": "1 2", "y": "3"})
        assert mode is RenderMode.HTML

    def test_site_result_is_not_escaped(self, tagging_site):
        message = Message()
        result = process_tags(message, "[: b :]", RenderMode.HTML, site=tagging_site)
        assert result == "<b|None|html>"

    def test_render_time_site_wins_for_tags(self, tagging_site):
        """Test that the site argument overrides message.site for tags."""
        message = Message(site=PlainSite())
        result = process_tag(message, "custom x=1", RenderMode.TEXT, site=tagging_site)
        assert result == "<custom|1|text>"

    def test_none_result_becomes_empty(self):
        class NoneSite:
            def process_message_tag(self, message, tag, mode):
                return None

        assert process_tags(Message(), "a[: t :]b", RenderMode.TEXT, site=NoneSite()) == "ab"

    def test_sub_is_never_delegated(self, tagging_site):
        message = Message(params={"name": "n"})
        process_tags(message, "[: sub param=name :]", RenderMode.TEXT, site=tagging_site)
        assert tagging_site.calls == []
