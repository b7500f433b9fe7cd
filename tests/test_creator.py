"""Tests for new formula creation."""

import io

import pytest

from tapsmith.creator import FormulaCreator, Slug, capitalize_name, parse_slug
from tapsmith.exceptions import AssetNotFoundError, SlugError, VersionError
from tapsmith.formula import Formula
from tapsmith.models.formula_data import FormulaData
from tapsmith.models.release import Release
from tapsmith.selector import AssetSelector

SHA = "c" * 64


class FakeClient:
    """Release client recording which endpoint was used."""

    def __init__(self, release: Release) -> None:
        self.release = release
        self.calls: list[tuple] = []

    def get_latest_release(self, owner: str, repo: str) -> Release:
        self.calls.append(("latest", owner, repo))
        return self.release

    def get_release_by_tag(self, owner: str, repo: str, tag: str) -> Release:
        self.calls.append(("tag", owner, repo, tag))
        return self.release


class FakeHashCalculator:
    """Hash calculator returning a fixed digest."""

    def __init__(self) -> None:
        self.urls: list[str] = []

    def calculate_url_hash(self, url: str) -> str:
        self.urls.append(url)
        return SHA


@pytest.fixture
def make_creator(release_payload):
    """Build a creator around a release of acme/my-tool."""

    def _make(tag: str = "v1.2.0", filenames: list[str] | None = None):
        if filenames is None:
            filenames = [
                "my-tool_linux_amd64.tar.gz",
                "my-tool_darwin_amd64.zip",
                "my-tool_darwin_amd64.tar.gz",
            ]
        release = Release.from_api_response(
            release_payload(tag, filenames, owner="acme", repo="my-tool")
        )
        client = FakeClient(release)
        hash_calculator = FakeHashCalculator()
        creator = FormulaCreator(client, hash_calculator, AssetSelector("darwin", "amd64"))
        return creator, client, hash_calculator

    return _make


@pytest.fixture
def formula_data():
    """Provide complete template data."""
    return FormulaData(
        name="my-tool",
        capitalized_name="MyTool",
        owner="acme",
        repo="my-tool",
        version="1.2.0",
        sha256=SHA,
        url="https://github.com/acme/my-tool/releases/download/v1.2.0/my-tool_darwin_amd64.zip",
    )


class TestParseSlug:
    """Test slug parsing."""

    def test_without_tag(self):
        """Test owner/repo means the latest release."""
        assert parse_slug("owner/repo") == Slug("owner", "repo", "")

    def test_with_tag(self):
        """Test owner/repo@tag keeps the tag."""
        slug = parse_slug("owner/repo@v2.0.0")
        assert slug.owner == "owner"
        assert slug.repo == "repo"
        assert slug.tag == "v2.0.0"

    @pytest.mark.parametrize("slug", ["owner", "a/b/c", "/repo", "owner/", "owner/@v1"])
    def test_invalid(self, slug):
        """Test malformed slugs are rejected."""
        with pytest.raises(SlugError):
            parse_slug(slug)


class TestCapitalizeName:
    """Test class name derivation."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("my-tool", "MyTool"),
            ("ghg", "Ghg"),
            ("go_cli", "GoCli"),
            ("myTool", "MyTool"),
            ("a-b-c", "ABC"),
        ],
    )
    def test_capitalize(self, name, expected):
        """Test words are title-cased and joined."""
        assert capitalize_name(name) == expected


class TestCreate:
    """Test gathering template data."""

    def test_latest_release(self, make_creator):
        """Test the latest release is used without a tag."""
        creator, client, hash_calculator = make_creator()
        data = creator.create("acme/my-tool")

        assert client.calls == [("latest", "acme", "my-tool")]
        assert data.name == "my-tool"
        assert data.capitalized_name == "MyTool"
        assert data.version == "1.2.0"
        assert data.url.endswith("/v1.2.0/my-tool_darwin_amd64.zip")
        assert data.sha256 == SHA
        assert hash_calculator.urls == [data.url]

    def test_tagged_release(self, make_creator):
        """Test a tag selects the release by tag."""
        creator, client, _ = make_creator(tag="v0.9.1-beta.2")
        data = creator.create("acme/my-tool@v0.9.1-beta.2")

        assert client.calls == [("tag", "acme", "my-tool", "v0.9.1-beta.2")]
        assert data.version == "0.9.1"

    def test_invalid_tag(self, make_creator):
        """Test a non-semantic tag fails."""
        creator, _, _ = make_creator(tag="nightly")
        with pytest.raises(VersionError, match="invalid tag name"):
            creator.create("acme/my-tool")

    def test_no_platform_asset(self, make_creator):
        """Test a release without a matching binary fails."""
        creator, _, hash_calculator = make_creator(filenames=["my-tool_windows_amd64.zip"])
        with pytest.raises(AssetNotFoundError):
            creator.create("acme/my-tool")
        assert hash_calculator.urls == []

    def test_invalid_slug(self, make_creator):
        """Test slug errors happen before any request."""
        creator, client, _ = make_creator()
        with pytest.raises(SlugError):
            creator.create("my-tool")
        assert client.calls == []


class TestRender:
    """Test template rendering."""

    def test_render(self, make_creator, formula_data):
        """Test the template receives every field."""
        creator, _, _ = make_creator()
        rendered = creator.render(formula_data)

        assert rendered.startswith("class MyTool < Formula\n")
        assert "  version '1.2.0'\n" in rendered
        assert "  homepage 'https://github.com/acme/my-tool'\n" in rendered
        assert f'  url "{formula_data.url}"\n' in rendered
        assert f"  sha256 '{SHA}'\n" in rendered
        assert "  head 'https://github.com/acme/my-tool.git'\n" in rendered
        assert "    bin.install 'my-tool'\n" in rendered
        assert rendered.endswith("end\n")

    def test_rendered_formula_parses(self, make_creator, formula_data):
        """Test a created formula can be updated later."""
        creator, _, _ = make_creator()
        formula = Formula(creator.render(formula_data))

        assert formula.version == "1.2.0"
        assert formula.sha256 == SHA
        assert formula.url == formula_data.url
        assert (formula.owner, formula.repo) == ("acme", "my-tool")


class TestWrite:
    """Test output destinations."""

    def test_stream(self, make_creator, formula_data):
        """Test the formula goes to the stream by default."""
        creator, _, _ = make_creator()
        stream = io.StringIO()

        assert creator.write(formula_data, stream=stream) is None
        assert stream.getvalue() == creator.render(formula_data)

    def test_overwrite_uses_name(self, make_creator, formula_data, tmp_path, monkeypatch):
        """Test overwrite writes <name>.rb in the working directory."""
        monkeypatch.chdir(tmp_path)
        creator, _, _ = make_creator()
        stream = io.StringIO()

        written = creator.write(formula_data, stream=stream, overwrite=True)

        assert written is not None
        assert written.name == "my-tool.rb"
        assert (tmp_path / "my-tool.rb").read_text() == creator.render(formula_data)
        assert stream.getvalue() == ""

    def test_explicit_output(self, make_creator, formula_data, tmp_path):
        """Test an explicit output path is used."""
        creator, _, _ = make_creator()
        target = tmp_path / "Formula" / "tool.rb"
        target.parent.mkdir()

        assert creator.write(formula_data, output=target) == target
        assert target.read_text().startswith("class MyTool")
