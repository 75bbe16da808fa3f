"""Fixtures compartidas: hojas CSV de ejemplo y un 'now' fijo."""
from datetime import datetime, timezone

import pytest


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def comma_sheet():
    return (
        "ID,NAME,LAT,LON,ERT_RAW,EMF_RAW,EMF_S,RADON_RAW,MULLER_RAW,LEAF_RAW,ALERT,DATE\r\n"
        "ANK1,Ankara Merkez,39.93,32.86,300,150,,75,1.5,400,A1,2024-03-10\r\n"
        "\r\n"
        "IZM1,İzmir Körfez,38.42,27.14,60,999,0.6,15,0.3,80,,2024-03-10\r\n"
        "NUL1,Sin posición,0,0,100,100,,10,1,10,,\r\n"
    )


@pytest.fixture
def semicolon_sheet():
    return (
        ";ID;İstasyon;Enlem;Boylam;RADON_RAW;EMF_RAW\n"
        "0;VAN1;Van Gölü;38,49;43,38;112,5;12,5\n"
        "1;ERZ1;Erzurum;39,9;41,27\n"
    )
