"""Tests for the docker run argument builder and WordPress option assembly."""

from __future__ import annotations

import pytest

from wpci.config import Settings
from wpci.errors import InvalidRunOptionError
from wpci.models import ActionInputs
from wpci.services.run_args import DockerRunArgs
from wpci.services.wordpress import container_run_args


class TestDockerRunArgs:
    def test_fixed_prefix_then_insertion_order(self):
        args = (
            DockerRunArgs(name="wp", network="net", publish="8080:80")
            .volume("./a", "/mnt/a")
            .env("FOO", "bar")
        )
        assert args.build() == [
            "--detach",
            "--name=wp",
            "--publish=8080:80",
            "--network=net",
            "--volume=./a:/mnt/a",
            "--env=FOO=bar",
        ]

    def test_unset_fields_omitted(self):
        assert DockerRunArgs(detach=False).build() == []

    def test_values_are_not_quoted(self):
        args = DockerRunArgs().env("PASSWORD", 'p@ss "word" $HOME')
        assert args.options() == ['--env=PASSWORD=p@ss "word" $HOME']

    def test_empty_env_value_allowed(self):
        assert DockerRunArgs().env("EMPTY", "").options() == ["--env=EMPTY="]

    @pytest.mark.parametrize("key", ["", "1ABC", "A-B", "A B", "A=B"])
    def test_invalid_env_key(self, key: str):
        with pytest.raises(InvalidRunOptionError):
            DockerRunArgs().env(key, "x")

    def test_env_value_with_newline(self):
        with pytest.raises(InvalidRunOptionError):
            DockerRunArgs().env("KEY", "line1\nline2")

    @pytest.mark.parametrize(
        ("source", "destination"),
        [
            ("", "/mnt"),
            ("./a:b", "/mnt"),
            ("./a", "relative/path"),
            ("./a", "/mnt:ro"),
        ],
    )
    def test_invalid_mount(self, source: str, destination: str):
        with pytest.raises(InvalidRunOptionError):
            DockerRunArgs().volume(source, destination)

    def test_env_vars_and_mounts_views(self):
        args = DockerRunArgs().env("A", "1").volume("./x", "/x").env("B", "2")
        assert [e.key for e in args.env_vars] == ["A", "B"]
        assert [m.destination for m in args.mounts] == ["/x"]


class TestContainerRunArgs:
    def test_all_inputs(self):
        inputs = ActionInputs(
            image="registry.io/some-vendor/image-name:some-image-tag",
            plugins="./plugin1\n./plugin2",
            themes="./theme1\n./theme2",
            db_host="some-db-host",
            db_name="some-db-name",
            db_user="some-db-user",
            db_password="some-db-password",
            clean_on_start=True,
            import_sql="./some-db-export.sql",
        )
        args = container_run_args(inputs, Settings(), "some-network")

        assert args.build()[:4] == [
            "--detach",
            "--name=wordpress-ci",
            "--publish=8080:80",
            "--network=some-network",
        ]
        assert args.options() == [
            "--env=WORDPRESS_DB_HOST=some-db-host",
            "--env=WORDPRESS_DB_NAME=some-db-name",
            "--env=WORDPRESS_DB_USER=some-db-user",
            "--env=WORDPRESS_DB_PASSWORD=some-db-password",
            "--env=CLEAN_ON_START=yes",
            "--volume=./plugin1:/var/www/html/wp-content/plugins/plugin1",
            "--volume=./plugin2:/var/www/html/wp-content/plugins/plugin2",
            "--volume=./theme1:/var/www/html/wp-content/themes/theme1",
            "--volume=./theme2:/var/www/html/wp-content/themes/theme2",
            "--env=IMPORT_SQL_FILE=/opt/imports/import.sql",
            "--volume=./some-db-export.sql:/opt/imports/import.sql",
        ]

    def test_minimal_inputs(self):
        args = container_run_args(ActionInputs(image="img"), Settings(), "net")
        assert args.options() == [
            "--env=WORDPRESS_DB_HOST=",
            "--env=WORDPRESS_DB_NAME=",
            "--env=WORDPRESS_DB_USER=",
            "--env=WORDPRESS_DB_PASSWORD=",
        ]

    def test_trailing_slash_ignored_for_basename(self):
        inputs = ActionInputs(image="img", plugins="./example/myplugin/")
        args = container_run_args(inputs, Settings(), "net")
        assert args.mounts[0].destination == "/var/www/html/wp-content/plugins/myplugin"

    def test_configured_container_name(self):
        args = container_run_args(ActionInputs(image="img"), Settings(container_name="wp-7"), "net")
        assert "--name=wp-7" in args.build()

    @pytest.mark.parametrize("path", ["/", "//", ".", "./", ".."])
    def test_plugin_without_directory_name_rejected(self, path):
        inputs = ActionInputs(image="img", plugins=path)
        with pytest.raises(InvalidRunOptionError, match="Cannot derive a mount name"):
            container_run_args(inputs, Settings(), "net")

    def test_theme_root_rejected(self):
        inputs = ActionInputs(image="img", themes="/")
        with pytest.raises(InvalidRunOptionError):
            container_run_args(inputs, Settings(), "net")
