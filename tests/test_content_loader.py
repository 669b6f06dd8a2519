"""
Tests for loading article records from the content directory.
"""
import json
import shutil
import tempfile
from datetime import date
from pathlib import Path

import pytest

from content_service import (
    ContentLoader,
    DuplicateSlugError,
    MalformedArticleError,
    build_content_index,
)
from content_service.markdown_processor import (
    extract_excerpt,
    extract_title,
    split_front_matter,
)


class TestMarkdownProcessor:
    """Front matter splitting and excerpt extraction."""

    def test_split_front_matter(self):
        text = "---\ntitle: Hello\ntags: [AWS, Cloud]\ndate: 2024-06-01\n---\nBody text\n"
        metadata, body = split_front_matter(text)
        assert metadata == {"title": "Hello", "tags": ["AWS", "Cloud"], "date": date(2024, 6, 1)}
        assert body == "Body text\n"

    def test_no_front_matter(self):
        metadata, body = split_front_matter("# Just a heading\n")
        assert metadata == {}
        assert body == "# Just a heading\n"

    def test_unterminated_front_matter(self):
        with pytest.raises(ValueError):
            split_front_matter("---\ntitle: Hello\n")

    def test_longer_dash_line_does_not_close_front_matter(self):
        with pytest.raises(ValueError):
            split_front_matter("---\ntitle: Hello\n----\nBody\n")
        with pytest.raises(ValueError):
            split_front_matter("---\ntitle: Hello\n---more\n")

    def test_closing_fence_allows_trailing_blanks(self):
        text = "---\ntitle: Hello\ndate: 2024-06-01\n---  \nBody\n----\nMore\n"
        metadata, body = split_front_matter(text)
        assert metadata == {"title": "Hello", "date": date(2024, 6, 1)}
        assert body == "Body\n----\nMore\n"

    def test_opening_fence_must_be_whole_line(self):
        metadata, body = split_front_matter("----\nNot front matter\n")
        assert metadata == {}
        assert body == "----\nNot front matter\n"

    def test_crlf_front_matter(self):
        metadata, body = split_front_matter("---\r\ntitle: Hello\r\n---\r\nBody\r\n")
        assert metadata == {"title": "Hello"}
        assert body == "Body\r\n"

    def test_invalid_yaml(self):
        with pytest.raises(ValueError):
            split_front_matter("---\ntitle: [unclosed\n---\n")

    def test_front_matter_must_be_mapping(self):
        with pytest.raises(ValueError):
            split_front_matter("---\n- a\n- b\n---\n")

    def test_extract_title(self):
        assert extract_title("Intro\n\n## Getting Started\n") == "Getting Started"
        assert extract_title("no headings here") == ""

    def test_excerpt_skips_mdx_and_headings(self):
        body = (
            "import Callout from './Callout'\n\n"
            "# Heading\n\n"
            "<Callout type=\"info\" />\n\n"
            "This is **bold** intro text.\n\n"
            "Second paragraph."
        )
        assert extract_excerpt(body) == "This is bold intro text."

    def test_excerpt_skips_code_fences(self):
        body = "```python\nprint('hi')\n```\n\nAfter the code."
        assert extract_excerpt(body) == "After the code."

    def test_excerpt_truncated_at_word_boundary(self):
        assert extract_excerpt("word " * 100, 20) == "word word word..."

    @pytest.mark.parametrize("max_length", [5, 12, 19, 20, 21, 200])
    def test_excerpt_never_exceeds_max_length(self, max_length):
        text = "Lambda functions scale, automatically; on demand. " * 10
        excerpt = extract_excerpt(text, max_length)
        assert len(excerpt) <= max_length
        assert excerpt.endswith("...")

    def test_excerpt_keeps_word_ending_at_cut(self):
        # "alpha beta" is exactly the room left before the marker
        assert extract_excerpt("alpha beta gamma delta", 13) == "alpha beta..."

    def test_empty_excerpt(self):
        assert extract_excerpt("# Only a heading") == ""


class TestContentLoader:
    """Loading Markdown, MDX and JSON article sources."""

    def setup_method(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.content_dir = self.temp_dir / "blog"
        self.content_dir.mkdir()

    def teardown_method(self):
        shutil.rmtree(self.temp_dir)

    def _write(self, relative: str, text: str) -> Path:
        path = self.content_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def test_load_markdown_article(self):
        self._write(
            "aws/iam-intro.mdx",
            "---\ntitle: Intro to IAM\ndate: 2024-01-01\ntags: [AWS, Security]\n"
            "summary: Users and roles.\nlastmod: 2024-02-01\n---\n\nBody.\n",
        )
        records = ContentLoader(self.content_dir).load_records()
        assert records == [{
            "slug": "aws/iam-intro",
            "title": "Intro to IAM",
            "date": date(2024, 1, 1),
            "tags": ["AWS", "Security"],
            "summary": "Users and roles.",
            "body": "aws/iam-intro.mdx",
            "draft": False,
            "last_modified": date(2024, 2, 1),
        }]

    def test_slug_from_path(self):
        loader = ContentLoader(self.content_dir)
        assert loader.slug_for(self.content_dir / "Cloud" / "My-Post.md") == "cloud/my-post"
        assert loader.slug_for(self.content_dir / "series" / "part-1" / "index.mdx") == "series/part-1"
        assert loader.slug_for(self.content_dir / "index.md") == "index"

    def test_title_and_summary_fallbacks(self):
        self._write("post.md", "---\ndate: 2024-03-01\n---\n# From Heading\n\nFirst paragraph here.\n")
        self._write("untitled.md", "---\ndate: 2024-03-02\n---\nNo heading at all.\n")
        records = {r["slug"]: r for r in ContentLoader(self.content_dir).load_records()}
        assert records["post"]["title"] == "From Heading"
        assert records["post"]["summary"] == "First paragraph here."
        assert records["untitled"]["title"] == "untitled"

    def test_summary_length(self):
        self._write("long.md", "---\ndate: 2024-03-01\n---\n" + "word " * 100)
        records = ContentLoader(self.content_dir, summary_length=20).load_records()
        assert records[0]["summary"] == "word word word..."
        assert len(records[0]["summary"]) <= 20

    def test_drafts_skipped_by_default(self):
        self._write("published.md", "---\ndate: 2024-01-01\n---\nText\n")
        self._write("draft.md", "---\ndate: 2024-01-02\ndraft: true\n---\nText\n")
        self._write("draft-str.md", "---\ndate: 2024-01-03\ndraft: 'yes'\n---\nText\n")
        slugs = [r["slug"] for r in ContentLoader(self.content_dir).load_records()]
        assert slugs == ["published"]

    def test_drafts_included_when_configured(self):
        self._write("published.md", "---\ndate: 2024-01-01\n---\nText\n")
        self._write("draft.md", "---\ndate: 2024-01-02\ndraft: true\n---\nText\n")
        records = ContentLoader(self.content_dir, include_drafts=True).load_records()
        assert sorted(r["slug"] for r in records) == ["draft", "published"]

    def test_load_json_record(self):
        self._write("notes/cdk.json", json.dumps({
            "title": "CDK Notes",
            "date": "2024-04-01T10:00:00Z",
            "tags": "AWS, IaC",
            "content": "Constructs all the way down.",
        }))
        index = build_content_index(ContentLoader(self.content_dir).load_records())
        article = index.get("notes/cdk")
        assert article.title == "CDK Notes"
        assert article.date == date(2024, 4, 1)
        assert article.tags == ("AWS", "IaC")
        assert article.summary == "Constructs all the way down."

    def test_ignores_unsupported_files(self):
        self._write("post.md", "---\ndate: 2024-01-01\n---\nText\n")
        self._write("image.png", "not really an image")
        self._write("notes.txt", "plain text")
        assert [r["slug"] for r in ContentLoader(self.content_dir).load_records()] == ["post"]

    def test_missing_directory_gives_no_records(self):
        loader = ContentLoader(self.temp_dir / "does-not-exist")
        assert loader.load_records() == []

    def test_invalid_front_matter_is_malformed(self):
        self._write("broken.md", "---\ntitle: [oops\n---\nText\n")
        with pytest.raises(MalformedArticleError) as exc_info:
            ContentLoader(self.content_dir).load_records()
        assert exc_info.value.source == "broken.md"

    def test_invalid_json_is_malformed(self):
        self._write("broken.json", "{not json")
        with pytest.raises(MalformedArticleError):
            ContentLoader(self.content_dir).load_records()

    def test_json_array_is_malformed(self):
        self._write("list.json", "[1, 2, 3]")
        with pytest.raises(MalformedArticleError):
            ContentLoader(self.content_dir).load_records()

    def test_missing_date_halts_index_build(self):
        self._write("ok.md", "---\ndate: 2024-01-01\n---\nText\n")
        self._write("nodate.md", "---\ntitle: No date\n---\nText\n")
        records = ContentLoader(self.content_dir).load_records()
        with pytest.raises(MalformedArticleError) as exc_info:
            build_content_index(records)
        assert exc_info.value.source == "nodate.md"

    def test_same_slug_from_two_files_is_duplicate(self):
        self._write("post.md", "---\ndate: 2024-01-01\n---\nText\n")
        self._write("post.mdx", "---\ndate: 2024-01-02\n---\nText\n")
        records = ContentLoader(self.content_dir).load_records()
        with pytest.raises(DuplicateSlugError) as exc_info:
            build_content_index(records)
        assert exc_info.value.sources == ["post.md", "post.mdx"]
