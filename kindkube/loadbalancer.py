"""Configuration for the external load balancer in front of the control plane."""

from __future__ import annotations

from dataclasses import dataclass, field

IMAGE = "docker.io/kindest/haproxy:v20230227-d46f45b6"
"""The load balancer image and tag."""

CONFIG_PATH = "/usr/local/etc/haproxy/haproxy.cfg"
"""Where the configuration file lives inside the image."""

_PREAMBLE = """\
# generated by kind
global
  log /dev/log local0
  log /dev/log local1 notice
  daemon

resolvers docker
  nameserver dns 127.0.0.11:53

defaults
  log global
  mode tcp
  option dontlognull
  # TODO: tune these
  timeout connect 5000
  timeout client 50000
  timeout server 50000
  # allow to boot despite dns don't resolve backends
  default-server init-addr none

"""


@dataclass
class ConfigData:
    """Values supplied to the load balancer configuration."""

    control_plane_port: int
    backend_servers: dict[str, str] = field(default_factory=dict)
    ipv6: bool = False


def _server_line(name: str, address: str, family: str) -> str:
    return (
        f"\n  server {name} {address} check check-ssl verify none "
        f"resolvers docker resolve-prefer {family}"
    )


def render_config(data: ConfigData) -> str:
    """Render the haproxy configuration for data.

    Backend servers are listed in sorted order of their names.
    """
    port = data.control_plane_port
    ipv6_bind = f"bind :::{port};" if data.ipv6 else ""
    family = "ipv6" if data.ipv6 else "ipv4"
    servers = "".join(
        _server_line(name, address, family)
        for name, address in sorted(data.backend_servers.items())
    )
    return (
        _PREAMBLE
        + "frontend control-plane\n"
        + f"  bind *:{port}\n"
        + f"  {ipv6_bind}\n"
        + "  default_backend kube-apiservers\n"
        + "\n"
        + "backend kube-apiservers\n"
        + "  option httpchk GET /healthz\n"
        + "  # TODO: we should be verifying (!)\n"
        + f"  {servers}\n"
    )