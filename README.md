# kindkube

Helpers for the kubeconfig entries and support files of local Kubernetes
clusters: kubeconfig reading, merging, removal and encoding, rendering of
the haproxy load balancer configuration, and unpacking of log archives.

## Install

    pip install kindkube

## Kubeconfig handling

The modules work on `kindkube.types.Config`, a dataclass that holds the
clusters, users, contexts and current context of a kubeconfig. Fields the
package does not look at are kept in `other_fields` and are written back
unchanged. `Config.from_dict` builds one from decoded YAML and
`Config.to_dict` gives the plain mapping back.

Turn a kubeadm `admin.conf` into a config for one cluster and merge it into
your kubeconfig:

```python
from kindkube.read import kind_from_raw_kubeadm
from kindkube.merge import write_merged

with open("admin.conf") as fh:
    cfg = kind_from_raw_kubeadm(fh.read(), "dev", "https://127.0.0.1:6443")

write_merged(cfg, "")  # "" means: follow $KUBECONFIG / $HOME/.kube/config
```

`kind_from_raw_kubeadm` renames the cluster, user and context, and the
references between them, to `kind-dev` (see `kindkube.helpers.kind_cluster_key`),
sets the current context to it, and replaces the cluster's server unless the
server given is empty.

`write_merged` picks the file the way kubectl does: an explicit path if one
is given; otherwise, from the entries of `$KUBECONFIG`, the first file that
exists, or the last entry if none exists; otherwise `$HOME/.kube/config`
(see `kindkube.paths`). Entries with the same name are replaced, others are
appended, and the current context is switched to the new cluster. If the
existing file has no other top-level fields, such as `apiVersion` and
`kind`, they are taken from the new config. Missing directories are created
and the file is written with mode 0600.

Remove the cluster's entries again:

```python
from kindkube.remove import remove_kind

remove_kind("dev", "")
```

`remove_kind` goes through every file kubectl would consider. It clears the
current context if that context points at the cluster, and it rewrites a
file only if something in it changed. `kindkube.remove.remove` and
`kindkube.merge.merge` do the same work on a `Config` in memory.

While it changes a file, the package holds a `<file>.lock` lock file
(`kindkube.lock.lock_file`, `unlock_file`, or the `locked` context manager).
If the lock file already exists, the change fails.

Encode a config as YAML:

```python
from kindkube.encode import encode

text = encode(cfg)
```

The YAML has sorted keys and block style. An empty config encodes to an
empty string. `kindkube.read.read` loads a file, and gives an empty config
if the file does not exist. `kindkube.write.write` saves one.

## Load balancer config

```python
from kindkube.loadbalancer import ConfigData, render_config

print(render_config(ConfigData(
    control_plane_port=6443,
    backend_servers={"dev-control-plane": "dev-control-plane:6443"},
    ipv6=False,
)))
```

The backend servers are listed in the order of their names. With
`ipv6=True`, the output has an extra IPv6 bind line and the servers prefer
IPv6 resolution. `IMAGE` and `CONFIG_PATH` name the haproxy image and the
path of the config file inside it.

## Log extraction

```python
import logging
from kindkube.logs import untar

with open("logs.tar", "rb") as stream:
    untar(stream, "out/logs", logging.getLogger("logs"))
```

Regular files and directories are written out. Other kinds of entry are
logged as warnings and skipped. After the archive, the rest of the stream
is read to its end. An empty or all-zero stream writes nothing.
`copy_stream` copies one binary stream to another.

## What it does not do

The package does not create, start or delete clusters, and it does not
connect to cluster nodes. You supply the kubeadm kubeconfig text, the API
server address and the log tar stream yourself. There is no command-line
tool.

## Errors

Kubeconfig problems raise `kindkube.helpers.KubeconfigError`. This covers
unreadable or malformed YAML, a failed lock, a failed write, and a kubeadm
config that does not hold exactly one cluster, one user and one context.
Log extraction problems raise `kindkube.logs.LogsError`.

## Tests

    pip install -e ".[test]"
    pytest