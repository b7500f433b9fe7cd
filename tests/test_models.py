"""Tests for release and template data models."""

import pytest

from tapsmith.models import FormulaData, Release, ReleaseAsset


def test_release_from_api_response():
    """Test GitHub release JSON is converted."""
    release = Release.from_api_response(
        {
            "tag_name": "v1.0.0",
            "name": "First",
            "prerelease": True,
            "html_url": "https://github.com/acme/tool/releases/tag/v1.0.0",
            "assets": [
                {
                    "name": "tool.zip",
                    "browser_download_url": "https://github.com/acme/tool/releases/download/v1.0.0/tool.zip",
                }
            ],
        }
    )
    assert release.tag_name == "v1.0.0"
    assert release.prerelease is True
    assert release.assets == [
        ReleaseAsset(
            name="tool.zip",
            browser_download_url="https://github.com/acme/tool/releases/download/v1.0.0/tool.zip",
        )
    ]


def test_release_with_null_assets():
    """Test a null asset list is treated as empty."""
    assert Release.from_api_response({"tag_name": "v1", "assets": None}).assets == []


def test_formula_data_context():
    """Test derived template values."""
    data = FormulaData(name="tool", capitalized_name="Tool", owner="acme", repo="tool")
    context = data.to_dict()
    assert context["homepage"] == "https://github.com/acme/tool"
    assert context["head_url"] == "https://github.com/acme/tool.git"
    assert context["version"] == ""


@pytest.mark.parametrize("tag_name", [None, "", 1])
def test_release_rejects_invalid_tag_name(tag_name):
    """Test a release needs a non-empty string tag."""
    with pytest.raises(TypeError, match="tag_name"):
        Release.from_api_response({"tag_name": tag_name, "assets": []})
