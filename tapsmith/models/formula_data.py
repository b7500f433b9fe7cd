"""Values rendered into a newly created formula."""

from dataclasses import asdict, dataclass


@dataclass
class FormulaData:
    """Fields of the formula creation template."""

    name: str
    capitalized_name: str
    owner: str
    repo: str
    version: str = ""
    sha256: str = ""
    url: str = ""

    @property
    def homepage(self) -> str:
        """Project page on GitHub."""
        return f"https://github.com/{self.owner}/{self.repo}"

    @property
    def head_url(self) -> str:
        """Git URL used for HEAD installs."""
        return f"{self.homepage}.git"

    def to_dict(self) -> dict[str, str]:
        """Return template context for rendering."""
        context = asdict(self)
        context["homepage"] = self.homepage
        context["head_url"] = self.head_url
        return context
