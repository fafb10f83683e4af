"""Tests for the builder pattern."""
import dataclasses

import pytest
from patterns import WebService, WebServiceBuilder
from utils import BuilderError


class TestWebServiceBuilder:
    """Tests for WebServiceBuilder."""

    def test_defaults(self):
        """Test unset attributes default to empty strings."""
        service = WebServiceBuilder().build()
        assert service == WebService()
        assert service.url == ""
        assert service.content_type == ""

    def test_chaining_returns_builder(self):
        """Test configuration calls return the same builder."""
        builder = WebServiceBuilder()
        assert builder.with_header("h") is builder
        assert builder.with_url_and_param(url="u", param="p") is builder
        assert builder.with_token("t") is builder
        assert builder.with_content_type("c") is builder

    def test_full_build(self):
        """Test every attribute is carried into the product."""
        service = (
            WebServiceBuilder()
            .with_header("Accept: */*")
            .with_url_and_param(url="https://api.test", param="q=1")
            .with_token("secret")
            .with_content_type("application/json")
            .build()
        )

        assert service == WebService(
            header="Accept: */*",
            url="https://api.test",
            param="q=1",
            token="secret",
            content_type="application/json"
        )

    def test_last_call_wins(self):
        """Test a repeated attribute keeps its last value."""
        service = WebServiceBuilder().with_token("old").with_token("new").build()
        assert service.token == "new"

    def test_order_does_not_matter(self):
        """Test call order does not change the result."""
        first = WebServiceBuilder().with_header("h").with_token("t").build()
        second = WebServiceBuilder().with_token("t").with_header("h").build()
        assert first == second

    def test_separate_builders_give_equal_values(self):
        """Test identical call sequences give equal but distinct values."""
        first = WebServiceBuilder().with_url_and_param(url="u", param="p").build()
        second = WebServiceBuilder().with_url_and_param(url="u", param="p").build()

        assert first == second
        assert first is not second

    def test_product_is_immutable(self):
        """Test the built value cannot be changed."""
        service = WebServiceBuilder().with_token("t").build()
        with pytest.raises(dataclasses.FrozenInstanceError):
            service.token = "other"

    def test_single_use(self):
        """Test the builder refuses further use after build."""
        builder = WebServiceBuilder().with_header("h")
        service = builder.build()

        with pytest.raises(BuilderError):
            builder.with_token("t")
        with pytest.raises(BuilderError):
            builder.build()

        assert service.token == ""

    def test_reset_allows_reuse(self):
        """Test reset starts a fresh draft."""
        builder = WebServiceBuilder().with_header("h")
        first = builder.build()
        second = builder.reset().with_token("t").build()

        assert first == WebService(header="h")
        assert second == WebService(token="t")

    def test_required_attributes(self):
        """Test required attributes are enforced at build time."""
        builder = WebServiceBuilder(required=("url", "token")).with_token("t")

        with pytest.raises(BuilderError) as exc_info:
            builder.build()

        assert exc_info.value.details['missing'] == ['url']

        service = builder.with_url_and_param(url="u", param="").build()
        assert service.url == "u"

    def test_unknown_required_attribute(self):
        """Test naming an attribute WebService lacks is rejected."""
        with pytest.raises(BuilderError):
            WebServiceBuilder(required=("body",))


class TestWebService:
    """Tests for WebService."""

    def test_request(self, caplog):
        """Test the request line joins url, param, header and token."""
        service = WebService(header="H", url="U", param="P", token="T")

        with caplog.at_level("INFO"):
            line = service.request()

        assert line == "U + P + H + T"
        assert line in caplog.messages
