import pytest

from kindkube.helpers import KubeconfigError
from kindkube.read import kind_from_raw_kubeadm, read
from kindkube.types import Cluster, Config, Context, NamedCluster, NamedContext, NamedUser

RAW_CONFIG = """apiVersion: v1
clusters:
- cluster:
    certificate-authority-data: definitelyacert
    server: https://192.168.9.4:6443
  name: kind
contexts:
- context:
    cluster: kind
    user: kubernetes-admin
  name: kubernetes-admin@kind
current-context: kubernetes-admin@kind
kind: Config
preferences: {}
users:
- name: kubernetes-admin
  user:
    client-certificate-data: seemslegit
    client-key-data: yep
"""


def _expected(server):
    return Config(
        clusters=[
            NamedCluster(
                name="kind-kind",
                cluster=Cluster(
                    server=server,
                    other_fields={"certificate-authority-data": "definitelyacert"},
                ),
            )
        ],
        contexts=[
            NamedContext(
                name="kind-kind",
                context=Context(user="kind-kind", cluster="kind-kind"),
            )
        ],
        users=[
            NamedUser(
                name="kind-kind",
                user={
                    "client-certificate-data": "seemslegit",
                    "client-key-data": "yep",
                },
            )
        ],
        current_context="kind-kind",
        other_fields={"apiVersion": "v1", "kind": "Config", "preferences": {}},
    )


def test_bad_config_raises():
    with pytest.raises(KubeconfigError):
        kind_from_raw_kubeadm("\t", "kind", "")


def test_invalid_yaml_raises():
    with pytest.raises(KubeconfigError):
        kind_from_raw_kubeadm("clusters: [unterminated", "kind", "")


def test_valid_config_with_server():
    server = "https://127.0.0.1:6443"
    cfg = kind_from_raw_kubeadm(RAW_CONFIG, "kind", server)
    assert cfg == _expected(server)


def test_valid_config_without_server_keeps_original():
    cfg = kind_from_raw_kubeadm(RAW_CONFIG, "kind", "")
    assert cfg == _expected("https://192.168.9.4:6443")


def test_cluster_name_used_in_key():
    cfg = kind_from_raw_kubeadm(RAW_CONFIG, "other", "")
    assert cfg.current_context == "kind-other"
    assert cfg.contexts[0].context.cluster == "kind-other"
    assert cfg.users[0].name == "kind-other"


def test_read_missing_file_gives_empty_config(tmp_path):
    assert read(str(tmp_path / "missing")) == Config()


def test_read_existing_file(tmp_path):
    path = tmp_path / "config"
    path.write_text(RAW_CONFIG, encoding="utf-8")
    cfg = read(str(path))
    assert cfg.current_context == "kubernetes-admin@kind"
    assert [c.name for c in cfg.clusters] == ["kind"]
    assert cfg.other_fields["kind"] == "Config"


def test_read_directory_raises(tmp_path):
    with pytest.raises(KubeconfigError):
        read(str(tmp_path))


def test_read_malformed_file_raises(tmp_path):
    path = tmp_path / "config"
    path.write_text("clusters: {bad", encoding="utf-8")
    with pytest.raises(KubeconfigError):
        read(str(path))