"""Tests for configuration models and environment loading."""

import pytest
from pydantic import ValidationError

from pubsub_hub.domain.exceptions import ConfigurationError
from pubsub_hub.infrastructure.config import DatabaseConfig, NATSConnectionConfig, PubSubConfig


class TestNATSConnectionConfig:
    """Test cases for NATSConnectionConfig."""

    def test_defaults(self):
        config = NATSConnectionConfig()
        assert config.servers == ["nats://localhost:4222"]
        assert config.enable_jetstream is True
        assert config.publish_timeout == 5.0

    @pytest.mark.parametrize(
        "server", ["nats://a:4222", "tls://a:4222", "ws://a:8080", "wss://a:8443"]
    )
    def test_valid_schemes(self, server):
        assert NATSConnectionConfig(servers=[server]).servers == [server]

    def test_invalid_scheme(self):
        with pytest.raises(ValidationError, match="Invalid server URL"):
            NATSConnectionConfig(servers=["http://a:4222"])

    def test_empty_servers(self):
        with pytest.raises(ValidationError):
            NATSConnectionConfig(servers=[])

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            NATSConnectionConfig(pool_size=3)

    def test_to_connection_params(self):
        params = NATSConnectionConfig(max_reconnect_attempts=3).to_connection_params()
        assert params == {
            "servers": ["nats://localhost:4222"],
            "max_reconnect_attempts": 3,
            "reconnect_time_wait": 2.0,
        }


class TestDatabaseConfig:
    """Test cases for DatabaseConfig."""

    def test_defaults(self):
        config = DatabaseConfig()
        assert config.schema_name == "pubsub_config"
        assert config.module_table == "messaging_module"
        assert config.audit_table == "audit_message"

    @pytest.mark.parametrize("name", ["pubsub; DROP", "1abc", "a-b", ""])
    def test_identifier_validation(self, name):
        with pytest.raises(ValidationError):
            DatabaseConfig(schema_name=name)

    def test_pool_bounds(self):
        with pytest.raises(ValidationError):
            DatabaseConfig(min_pool_size=5, max_pool_size=2)


class TestPubSubConfig:
    """Test cases for PubSubConfig."""

    def test_defaults(self):
        config = PubSubConfig(environment_id="folio")
        assert config.publishing_pool_size == 20
        assert config.publishing_queue_size == 1000
        assert config.log_level == "INFO"

    @pytest.mark.parametrize("environment_id", ["", "fo.lio", "fo lio", "env*", "env>"])
    def test_environment_id_must_be_channel_safe(self, environment_id):
        with pytest.raises(ValidationError):
            PubSubConfig(environment_id=environment_id)

    @pytest.mark.parametrize("size", [0, 1001])
    def test_pool_size_bounds(self, size):
        with pytest.raises(ValidationError):
            PubSubConfig(environment_id="folio", publishing_pool_size=size)


class TestPubSubConfigFromEnv:
    """Test loading PubSubConfig from environment variables."""

    def test_empty_environment_uses_defaults(self):
        config = PubSubConfig.from_env({})

        assert config.environment_id == "folio"
        assert config.publishing_pool_size == 20
        assert config.nats.servers == ["nats://localhost:4222"]
        assert config.database.dsn == "postgresql://localhost:5432/pubsub"

    def test_reads_variables(self):
        config = PubSubConfig.from_env(
            {
                "ENV": "snapshot",
                "EVENT_PUBLISHING_THREAD_POOL_SIZE": "4",
                "EVENT_PUBLISHING_QUEUE_SIZE": "50",
                "NATS_URL": "nats://n1:4222, nats://n2:4222",
                "NATS_ENABLE_JETSTREAM": "false",
                "NATS_JS_DOMAIN": "hub",
                "NATS_PUBLISH_TIMEOUT": "1.5",
                "DB_DSN": "postgresql://db:5432/folio",
                "DB_MAX_POOL_SIZE": "10",
                "DB_SCHEMA": "diku_pubsub",
                "LOG_LEVEL": "debug",
            }
        )

        assert config.environment_id == "snapshot"
        assert config.publishing_pool_size == 4
        assert config.publishing_queue_size == 50
        assert config.nats.servers == ["nats://n1:4222", "nats://n2:4222"]
        assert config.nats.enable_jetstream is False
        assert config.nats.js_domain == "hub"
        assert config.nats.publish_timeout == 1.5
        assert config.database.dsn == "postgresql://db:5432/folio"
        assert config.database.max_pool_size == 10
        assert config.database.schema_name == "diku_pubsub"
        assert config.log_level == "DEBUG"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("ENV", "from-process")
        monkeypatch.setenv("EVENT_PUBLISHING_THREAD_POOL_SIZE", "7")

        config = PubSubConfig.from_env()

        assert config.environment_id == "from-process"
        assert config.publishing_pool_size == 7

    @pytest.mark.parametrize(
        "environ",
        [
            {"EVENT_PUBLISHING_THREAD_POOL_SIZE": "lots"},
            {"EVENT_PUBLISHING_THREAD_POOL_SIZE": "0"},
            {"NATS_ENABLE_JETSTREAM": "maybe"},
            {"NATS_URL": "http://n1:4222"},
            {"ENV": "bad.env"},
            {"LOG_LEVEL": "verbose"},
            {"DB_SCHEMA": "x;y"},
        ],
    )
    def test_invalid_values_raise_configuration_error(self, environ):
        with pytest.raises(ConfigurationError):
            PubSubConfig.from_env(environ)
