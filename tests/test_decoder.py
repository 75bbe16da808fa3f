"""Tests del decodificador de la hoja publicada."""
import pytest

from api.errors import InvalidFeedFormat
from providers.defaults import DEFAULT_STATIONS
from services.decoder import decode_table, detect_delimiter, encode_table
from services.repository import build_stations


class TestDetectDelimiter:

    @pytest.mark.parametrize("header, expected", [
        ("ID,LAT,LON", ","),
        ("ID;LAT;LON", ";"),
        ("a;b,c;d", ";"),
        ("a;b,c", ","),
        ("ID", ","),
    ])
    def test_majority_rule(self, header, expected):
        assert detect_delimiter(header) == expected


class TestDecodeTable:

    def test_comma_sheet(self, comma_sheet):
        decoded = decode_table(comma_sheet)
        assert decoded.delimiter == ","
        assert len(decoded.rows) == 3
        assert decoded.rows[0]["ID"] == "ANK1"
        assert decoded.rows[1]["NAME"] == "İzmir Körfez"
        assert all("\r" not in v for row in decoded.rows for v in row.values())

    def test_short_rows_are_padded(self):
        decoded = decode_table("ID,NAME,LAT\nA,Alpha\n")
        assert decoded.rows == [{"ID": "A", "NAME": "Alpha", "LAT": ""}]

    def test_extra_cells_are_ignored(self):
        decoded = decode_table("ID,NAME\nA,Alpha,sobrante\n")
        assert decoded.rows == [{"ID": "A", "NAME": "Alpha"}]

    def test_unlabelled_index_column_is_dropped(self, semicolon_sheet):
        decoded = decode_table(semicolon_sheet)
        assert decoded.delimiter == ";"
        assert "" not in decoded.headers
        assert decoded.rows[0] == {
            "ID": "VAN1",
            "İstasyon": "Van Gölü",
            "Enlem": "38,49",
            "Boylam": "43,38",
            "RADON_RAW": "112,5",
            "EMF_RAW": "12,5",
        }

    def test_pandas_style_placeholder_header_is_dropped(self):
        decoded = decode_table("Unnamed: 0,ID\n0,A\n")
        assert decoded.headers == ["ID"]
        assert decoded.rows == [{"ID": "A"}]

    def test_quoted_cell_keeps_delimiter(self):
        decoded = decode_table('ID,NAME,LAT,LON,EMF_S\nA1,"Maraş, Merkez",37.57,36.93,0.9\n')
        assert decoded.rows == [{
            "ID": "A1", "NAME": "Maraş, Merkez", "LAT": "37.57", "LON": "36.93", "EMF_S": "0.9",
        }]
        stations = build_stations(decoded.rows, decoded.delimiter)
        assert len(stations) == 1
        assert stations[0].lon == pytest.approx(36.93)
        assert stations[0].metrics["EMF"] == pytest.approx(0.9)

    def test_quoted_decimal_comma_in_semicolon_sheet(self):
        decoded = decode_table('ID;NAME;LAT;LON\nV1;"Van; Merkez";38,49;43,38\n')
        assert decoded.rows[0]["NAME"] == "Van; Merkez"
        assert decoded.rows[0]["LON"] == "43,38"

    def test_source_order_preserved(self):
        decoded = decode_table("ID\nc\na\nb\n")
        assert [r["ID"] for r in decoded.rows] == ["c", "a", "b"]

    @pytest.mark.parametrize("text", ["", "\n\n", "  \r\n \n"])
    def test_empty_payload_is_invalid(self, text):
        with pytest.raises(InvalidFeedFormat):
            decode_table(text)

    @pytest.mark.parametrize("text", [
        "<!DOCTYPE html><html><body>Sign in</body></html>",
        "\n  <HTML lang='tr'>\n<head></head>",
        "<!doctype html>\nID,LAT\n",
    ])
    def test_markup_is_invalid(self, text):
        with pytest.raises(InvalidFeedFormat) as err:
            decode_table(text)
        assert err.value.kind == "invalid_format"


class TestRoundTrip:

    @pytest.mark.parametrize("delimiter", [",", ";"])
    def test_encoded_station_set_decodes_to_same_metrics(self, delimiter):
        text = encode_table(DEFAULT_STATIONS, delimiter=delimiter)
        decoded = decode_table(text)
        assert decoded.delimiter == delimiter

        rebuilt = build_stations(decoded.rows, decoded.delimiter)
        assert [p.id for p in rebuilt] == [p.id for p in DEFAULT_STATIONS]
        for original, copy in zip(DEFAULT_STATIONS, rebuilt):
            assert copy.name == original.name
            assert copy.lat == pytest.approx(original.lat)
            assert copy.lon == pytest.approx(original.lon)
            for key, value in original.metrics.items():
                assert copy.metrics[key] == pytest.approx(value), key

    def test_delimiter_inside_names_is_replaced(self):
        from providers.types import MonitoringPoint
        point = MonitoringPoint("X1", "Uno, dos", 40.0, 30.0, {"EMF": 0.5})
        text = encode_table([point], delimiter=",")
        assert "Uno  dos" in text
        assert len(decode_table(text).rows[0]) == 11

    def test_unknown_delimiter_rejected(self):
        with pytest.raises(ValueError):
            encode_table(DEFAULT_STATIONS, delimiter="\t")
