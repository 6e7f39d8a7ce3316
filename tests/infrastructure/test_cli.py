"""End-to-end tests of the click CLI against JSON files in a temporary directory."""

import re

import pytest
from click.testing import CliRunner
from PIL import Image

from catalog.infrastructure.bootstrap import Container
from catalog.infrastructure.cli.main import cli
from catalog.infrastructure.config import Settings

UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")


@pytest.fixture
def container(tmp_path):
    settings = Settings(_env_file=None, DATA_DIR=tmp_path / "data", UPLOAD_DIR=tmp_path / "uploads")
    return Container(settings)


@pytest.fixture
def run(container):
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(cli, list(args), obj=container)

    return invoke


def _created_id(result) -> str:
    assert result.exit_code == 0, result.output
    return UUID_RE.search(result.output).group(0)


class TestCategoryCli:

    def test_create_and_show(self, run):
        root_id = _created_id(run("category", "create", "--title", "My category"))
        child_id = _created_id(
            run("category", "create", "--title", "Child", "--parent", root_id)
        )

        result = run("category", "show", "--id", root_id)

        assert result.exit_code == 0
        assert "Slug:        my-category" in result.output
        assert "Level:       0" in result.output
        assert child_id in result.output

    def test_update_to_root(self, run):
        root_id = _created_id(run("category", "create", "--title", "Root"))
        child_id = _created_id(run("category", "create", "--title", "Child", "--parent", root_id))

        result = run("category", "update", "--id", child_id, "--root")

        assert result.exit_code == 0, result.output
        assert "Level:       0" in result.output
        assert "Parent:      -" in result.output

    def test_root_and_parent_are_exclusive(self, run):
        a = _created_id(run("category", "create", "--title", "Alpha"))
        b = _created_id(run("category", "create", "--title", "Beta"))
        result = run("category", "update", "--id", a, "--root", "--parent", b)
        assert result.exit_code != 0
        assert "mutually exclusive" in result.output

    def test_self_parent_reported(self, run):
        a = _created_id(run("category", "create", "--title", "Alpha"))
        result = run("category", "update", "--id", a, "--parent", a)
        assert result.exit_code == 1
        assert "Category cannot be its own parent." in result.output

    def test_list_and_delete(self, run):
        a = _created_id(run("category", "create", "--title", "Alpha"))
        _created_id(run("category", "create", "--title", "Beta"))

        listing = run("category", "list", "--order", "title:asc")
        assert listing.exit_code == 0
        assert listing.output.index("Alpha") < listing.output.index("Beta")
        assert "(2 categories)" in listing.output

        assert run("category", "delete", "--id", a).exit_code == 0
        assert "(1 categories)" in run("category", "list").output

    def test_list_paging_falls_back_on_bad_input(self, run):
        _created_id(run("category", "create", "--title", "Alpha"))
        _created_id(run("category", "create", "--title", "Beta"))

        second = run("category", "list", "--page", "2", "--per-page", "1")
        fallback = run("category", "list", "--page", "abc", "--per-page", "0")

        assert "Page 2/2 (2 categories)" in second.output
        assert fallback.exit_code == 0
        assert "Page 1/1 (2 categories)" in fallback.output

    def test_unknown_category(self, run):
        result = run("category", "show", "--id", "00000000-0000-0000-0000-000000000000")
        assert result.exit_code == 1
        assert "Category not found." in result.output


def _create_product(run, category_id, title="Trail runner", price="12.5") -> str:
    return _created_id(
        run(
            "product", "create",
            "--title", title,
            "--subtitle", "Light trail shoe",
            "--description", "A light shoe for rough terrain.",
            "--price", price,
            "--category", category_id,
        )
    )


class TestProductCli:

    def test_create_updates_count(self, run):
        category_id = _created_id(run("category", "create", "--title", "Shoes"))
        _create_product(run, category_id)

        result = run("category", "show", "--id", category_id)

        assert "Products:    1" in result.output

    def test_show_price_and_path(self, run):
        root_id = _created_id(run("category", "create", "--title", "Sport"))
        shoes_id = _created_id(run("category", "create", "--title", "Shoes", "--parent", root_id))
        product_id = _create_product(run, shoes_id)

        result = run("product", "show", "--id", product_id)

        assert "12.50 EUR" in result.output
        assert "Sport > Shoes" in result.output

    def test_move_between_categories(self, run):
        a = _created_id(run("category", "create", "--title", "Alpha"))
        b = _created_id(run("category", "create", "--title", "Beta"))
        product_id = _create_product(run, a)

        result = run("product", "update", "--id", product_id, "--category", b)

        assert result.exit_code == 0, result.output
        assert "Products:    0" in run("category", "show", "--id", a).output
        assert "Products:    1" in run("category", "show", "--id", b).output

    def test_delete_refused_for_category_with_products(self, run):
        a = _created_id(run("category", "create", "--title", "Alpha"))
        product_id = _create_product(run, a)

        refused = run("category", "delete", "--id", a)
        assert refused.exit_code == 1
        assert "Category still contains products." in refused.output

        assert run("product", "delete", "--id", product_id).exit_code == 0
        assert run("category", "delete", "--id", a).exit_code == 0

    def test_list_filters(self, run):
        a = _created_id(run("category", "create", "--title", "Alpha"))
        _create_product(run, a, title="Trail runner")
        _create_product(run, a, title="Hiking boot")

        result = run("product", "list", "--title", "runner")

        assert "Trail runner" in result.output
        assert "Hiking boot" not in result.output
        assert "(1 products)" in result.output

    def test_attach_image(self, run, container, tmp_path):
        a = _created_id(run("category", "create", "--title", "Alpha"))
        product_id = _create_product(run, a)
        image_path = tmp_path / "photo.png"
        Image.new("RGB", (4, 4)).save(image_path)

        result = run("product", "image", "--id", product_id, "--file", str(image_path))

        assert result.exit_code == 0, result.output
        assert len(list(container.settings.UPLOAD_DIR.glob("*.png"))) == 1

    def test_invalid_image_rejected(self, run, tmp_path):
        a = _created_id(run("category", "create", "--title", "Alpha"))
        product_id = _create_product(run, a)
        bogus = tmp_path / "photo.png"
        bogus.write_text("not an image")

        result = run("product", "image", "--id", product_id, "--file", str(bogus))

        assert result.exit_code == 1
        assert "Invalid image file." in result.output

    def test_invalid_price_reported(self, run):
        a = _created_id(run("category", "create", "--title", "Alpha"))
        result = run(
            "product", "create",
            "--title", "Shoe",
            "--subtitle", "Subtitle",
            "--description", "Description",
            "--price", "cheap",
            "--category", a,
        )
        assert result.exit_code == 1
        assert "Invalid money amount" in result.output


class TestRecountCli:

    def test_reports_clean_catalog(self, run):
        _created_id(run("category", "create", "--title", "Alpha"))
        result = run("recount")
        assert result.exit_code == 0
        assert "all counts correct" in result.output

    def test_repairs_drift(self, run, container):
        a = _created_id(run("category", "create", "--title", "Alpha"))
        _create_product(run, a)
        products_file = container.settings.products_file
        products_file.write_text("[]")

        dry = run("recount", "--dry-run")
        assert "Found 1 of 1 categories." in dry.output

        fixed = run("recount")
        assert "Fixed 1 of 1 categories." in fixed.output
        assert "all counts correct" in run("recount").output
