# xraykit

Small building blocks for distributed tracing with a tracing daemon:

- **`xraykit.header`**: parse and render the trace header value
  (`Root=...;Parent=...;Sampled=1;...`).
- **`xraykit.pattern`**: wildcard matching (`*` and `?`) of the kind used by
  sampling rules.
- **`xraykit.sqs`**: tell whether an SQS record carries a sampled trace header.
- **`xraykit.daemoncfg`**: resolve the daemon's UDP and TCP endpoints from the
  `AWS_XRAY_DAEMON_ADDRESS` environment variable or from a given string.
- **`xraykit.plugins`** and **`xraykit.awsplugins`**: collect metadata about the
  host (EC2, ECS, Elastic Beanstalk).
- **`xraykit.logger`**: the package's levelled logger.

The package has no runtime dependencies.

## Installation

```
pip install xraykit
```

To run the tests:

```
pip install "xraykit[test]"
pytest
```

## Trace headers

```python
from xraykit.header import Header, SamplingDecision

h = Header.from_string("Root=1-5759e988-bd862e3fe1be46a994272793;Parent=53995c3f42cd8ad8;Sampled=1")
h.trace_id            # '1-5759e988-bd862e3fe1be46a994272793'
h.parent_id           # '53995c3f42cd8ad8'
h.sampling_decision   # SamplingDecision.SAMPLED
str(h)                # 'Root=1-5759e988-bd862e3fe1be46a994272793;Parent=53995c3f42cd8ad8;Sampled=1'
```

Parts are split on `;` and stripped of surrounding spaces; parts without `=`
are ignored. `Self=` entries are dropped and any other `key=value` entries land
in `h.additional_data`. An unrecognised `Sampled=` value gives
`SamplingDecision.UNKNOWN`, which renders as nothing. When rendering, `Root`
and `Parent` are left out if empty.

## Wildcard matching

```python
from xraykit.pattern import wildcard_match, wildcard_match_case_insensitive

wildcard_match_case_insensitive("*/foo", "/bar/foo")   # True
wildcard_match("Foo", "FOO", False)                    # False
wildcard_match("Foo", "FOO", True)                     # True
```

`*` matches any run of characters, including none; `?` matches exactly one.
An empty pattern matches only empty text.

## Sampled queue messages

```python
from xraykit.sqs import is_sampled

is_sampled({"attributes": {"AWSTraceHeader": "Root=1-632BB806-bd862e3fe1be46a994272793;Sampled=1"}})  # True
is_sampled({"attributes": {}})                                                                          # False
```

The record is a mapping as found in a Lambda SQS event; the result is true
when its `AWSTraceHeader` attribute contains `Sampled=1`.

## Daemon endpoints

```python
from xraykit.daemoncfg import (
    DaemonConfigError,
    get_daemon_endpoints,
    get_daemon_endpoints_from_env,
    get_daemon_endpoints_from_string,
    get_default_daemon_endpoints,
)

endpoints = get_daemon_endpoints()   # env variable, else 127.0.0.1:2000
endpoints = get_daemon_endpoints_from_string("tcp:127.0.0.1:2000 udp:127.0.0.2:2001")
endpoints.udp_addr                   # ('127.0.0.2', 2001)
endpoints.tcp_addr                   # ('127.0.0.1', 2000)
```

Accepted forms are `host:port` (the same address for UDP and TCP) and
`tcp:host:port udp:host:port` in either order. Host names are resolved, an
IPv4 address being preferred. The environment variable always wins over the
string passed in.

- `get_daemon_endpoints_from_string` and `get_daemon_endpoints_from_env` return
  `None` when there is no address to resolve.
- `get_default_daemon_endpoints` returns `127.0.0.1:2000` for both.
- Invalid or unresolvable addresses raise `DaemonConfigError` (a `ValueError`),
  including from `get_daemon_endpoints` when the environment variable is bad.

## Host metadata

```python
from xraykit import plugins
from xraykit.awsplugins import beanstalk, ec2, ecs

ec2.init()        # queries the instance metadata service (token first, then without one)
ecs.init()        # records the host name as the container name
beanstalk.init()  # reads /var/elasticbeanstalk/xray/environment.conf

plugins.instance_plugin_metadata.origin     # e.g. 'AWS::ECS::Container'
plugins.instance_plugin_metadata.to_dict()  # {'ecs': {'container': '...'}, ...}
```

Each `init()` fills in the shared `plugins.instance_plugin_metadata` unless it
already holds that plugin's data, and sets its `origin`. Each module also offers
`add_plugin_metadata(metadata, ...)` to fill in a `PluginMetadata` of your own;
`beanstalk.add_plugin_metadata` takes the configuration file path and
`ec2.add_plugin_metadata` the metadata service base URL. `ec2.get_token` and
`ec2.get_metadata` perform the two requests and raise `OSError` on failure.
Failures inside `add_plugin_metadata` are logged, not raised, and leave the
metadata untouched.

## Logging

```python
import sys
from xraykit import logger

logger.set_logger(logger.DefaultLogger(sys.stderr, logger.LogLevel.DEBUG))
logger.info("resolved %s", "127.0.0.1:2000")
logger.debug_deferred(lambda: "built only when debug logging is on")
```

`DefaultLogger` writes `<timestamp> [LEVEL] message` lines for records at or
above its level (standard output when no stream is given). Any object with a
`log(level, message)` method can be passed to `set_logger`; `get_logger`
returns the current one.

## What it does not do

xraykit does not create, record or send segments. It resolves where the daemon
listens but never talks to it, and it does not fetch or apply sampling rules:
`xraykit.pattern` only provides the matching such rules need.