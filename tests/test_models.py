"""Tests for the pydantic models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from wpci.models import ActionInputs, ContainerInfo, ContainerNetworkInfo


class TestContainerInfo:
    def test_from_inspect_json(self):
        info = ContainerInfo.model_validate({
            "Id": "abc",
            "State": {"Running": True},
            "NetworkSettings": {
                "Ports": {},
                "Networks": {"bridge": {"DNSNames": None, "IPAddress": "172.17.0.2"}},
            },
        })
        assert info.id == "abc"
        assert info.networks["bridge"].dns_names == []

    def test_missing_network_settings(self):
        info = ContainerInfo.model_validate({"Id": "abc"})
        assert info.networks == {}

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationError):
            ContainerInfo.model_validate({"NetworkSettings": {}})

    def test_network_info_is_frozen(self):
        info = ContainerInfo.model_validate({"Id": "abc"})
        result = ContainerNetworkInfo(network_name="n", dns_names=["a"], container_info=info)
        with pytest.raises(ValidationError):
            result.network_name = "other"


class TestActionInputs:
    def test_newline_delimited_lists(self):
        inputs = ActionInputs(
            image="img",
            plugins="./plugin1\n\n  ./plugin2  \n",
            themes="",
        )
        assert inputs.plugins == ["./plugin1", "./plugin2"]
        assert inputs.themes == []

    def test_blank_import_sql_and_context(self):
        inputs = ActionInputs(image="img", import_sql="  ", test_command_context="")
        assert inputs.import_sql is None
        assert inputs.test_command_context == Path(".")

    def test_password_hidden_from_repr(self):
        inputs = ActionInputs(image="img", db_password="hunter2")
        assert "hunter2" not in repr(inputs)

    @pytest.mark.parametrize(
        ("db_host", "expected"),
        [
            ("mysql", "mysql"),
            ("mysql:3306", "mysql"),
            ("[::1]:3306", "::1"),
            ("::1", "::1"),
            ("", ""),
        ],
    )
    def test_db_hostname(self, db_host: str, expected: str):
        assert ActionInputs(image="img", db_host=db_host).db_hostname == expected
