"""
Tests for the CLI workflow and JSON output.
"""
import json
from unittest.mock import Mock, patch

from storefront.main import build_parser, run
from storefront.src.catalog_client import CatalogFetchError
from storefront.src.grouping import group_products_by_variants
from storefront.src.output import groups_to_json, summarize_groups, write_groups


PRODUCTS = [
    {"id": "p1", "brand": "Acme", "model": "X1", "status": "active", "price_retail": 1000,
     "specs": {"ram": "128GB", "storage": "8GB", "color": "Preto"}},
    {"id": "p2", "brand": "Acme", "model": "X1", "status": "active", "price_retail": 1200,
     "specs": {"ram": "8GB", "storage": "128GB", "color": "Azul"}},
    {"id": "p3", "brand": "Acme", "model": "X2", "status": "inactive", "price_retail": 800,
     "specs": {"ram": "4GB", "storage": "64GB", "color": "Preto"}},
]


def _args(tmp_path, *extra):
    return build_parser().parse_args(["--config", str(tmp_path / "config.json"), *extra])


class TestOutput:
    """Test output helpers."""

    def test_summarize_groups(self):
        """Should count groups, variants, colors and products"""
        stats = summarize_groups(group_products_by_variants(PRODUCTS))

        assert stats == {"groups": 1, "variants": 1, "colors": 2, "products": 2}

    def test_write_groups(self, tmp_path):
        """Should write the storefront JSON"""
        path = tmp_path / "out" / "groups.json"
        groups = group_products_by_variants(PRODUCTS)

        write_groups(groups, str(path))

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == groups_to_json(groups)
        assert data[0]["groupKey"] == "acme_x1"


class TestRun:
    """Test the CLI run function."""

    def test_groups_file_input(self, tmp_path):
        """Should load, group and write products from a file"""
        input_path = tmp_path / "products.json"
        input_path.write_text(json.dumps(PRODUCTS), encoding="utf-8")
        output_path = tmp_path / "groups.json"
        status = Mock()

        code = run(_args(tmp_path, "--input", str(input_path), "--output", str(output_path)), status=status)

        assert code == 0
        data = json.loads(output_path.read_text(encoding="utf-8"))
        assert len(data) == 1
        assert data[0]["variants"][0]["ram"] == "8GB"
        assert data[0]["variants"][0]["storage"] == "128GB"
        assert [c["name"] for c in data[0]["allColors"]] == ["Preto", "Azul"]
        status.assert_called()

    def test_missing_input(self, tmp_path):
        """Should fail when the input file does not exist"""
        args = _args(tmp_path, "--input", str(tmp_path / "missing.json"), "--output", str(tmp_path / "out.json"))

        assert run(args, status=Mock()) == 1
        assert not (tmp_path / "out.json").exists()

    def test_no_output(self, tmp_path):
        """Should fail without an output path"""
        assert run(_args(tmp_path, "--input", "products.json"), status=Mock()) == 1

    def test_no_input_for_file_source(self, tmp_path):
        """Should fail without an input path"""
        assert run(_args(tmp_path, "--output", str(tmp_path / "out.json")), status=Mock()) == 1

    @patch("storefront.main.CatalogClient")
    def test_api_source(self, mock_client_class, tmp_path):
        """Should fetch products from the backend"""
        mock_client = Mock()
        mock_client.fetch_products.return_value = PRODUCTS
        mock_client_class.return_value = mock_client
        output_path = tmp_path / "groups.json"

        code = run(_args(tmp_path, "--source", "api", "--output", str(output_path)), status=Mock())

        assert code == 0
        mock_client.fetch_products.assert_called_once()
        assert json.loads(output_path.read_text(encoding="utf-8"))[0]["groupKey"] == "acme_x1"

    @patch("storefront.main.CatalogClient")
    def test_api_failure(self, mock_client_class, tmp_path):
        """Should return 1 when the backend fetch fails"""
        mock_client = Mock()
        mock_client.fetch_products.side_effect = CatalogFetchError("HTTP 500", status_code=500)
        mock_client_class.return_value = mock_client

        code = run(_args(tmp_path, "--source", "api", "--output", str(tmp_path / "out.json")), status=Mock())

        assert code == 1

    def test_write_failure(self, tmp_path):
        """Should return 1 when the output cannot be written"""
        input_path = tmp_path / "products.json"
        input_path.write_text(json.dumps(PRODUCTS), encoding="utf-8")
        output_dir = tmp_path / "existing_dir"
        output_dir.mkdir()
        status = Mock()

        code = run(_args(tmp_path, "--input", str(input_path), "--output", str(output_dir)), status=status)

        assert code == 1
        assert any(c.args[0].startswith("❌") for c in status.call_args_list)

    def test_config_creation_is_logged(self, tmp_path):
        """Should log the default config creation to the log file"""
        log_path = tmp_path / "logs" / "run.log"
        input_path = tmp_path / "products.json"
        input_path.write_text(json.dumps(PRODUCTS), encoding="utf-8")

        code = run(_args(tmp_path, "--input", str(input_path), "--output", str(tmp_path / "out.json"),
                         "--log-file", str(log_path)), status=Mock())

        assert code == 0
        assert "Config file not found, creating default" in log_path.read_text(encoding="utf-8")

    def test_default_config_in_working_directory(self, tmp_path, monkeypatch):
        """Should create config.json in the working directory without --config"""
        monkeypatch.chdir(tmp_path)
        input_path = tmp_path / "products.json"
        input_path.write_text(json.dumps(PRODUCTS), encoding="utf-8")
        args = build_parser().parse_args(["--input", str(input_path), "--output", str(tmp_path / "out.json")])

        assert run(args, status=Mock()) == 0
        assert (tmp_path / "config.json").exists()
