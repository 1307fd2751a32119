# otelkit

Small building blocks for instrumenting services with tracing and metrics:
semantic-convention attributes for HTTP, network and gRPC, span status
mapping, a metadata carrier for propagation headers, and coloured console
logging. It uses only the standard library.

## What it gives you

- **Network attributes** (`otelkit.netconv`): `split_host_port`, `net_protocol`,
  `family`, `net_transport`, and the `NetConv` class (with a ready instance,
  `NC`) that builds `net.host.*`, `net.peer.*` and `net.sock.peer.*`
  attributes. Every attribute is a frozen `KeyValue`, built from a `Key` with
  `Key.string` or `Key.int`.
- **HTTP client attributes** (`otelkit.httpconv`): `Request` and `Response`
  describe the parts of a message that are read. `client_request`,
  `client_request_metrics` and `client_response` return attribute lists;
  `client_status` and `server_status` map an HTTP status code to a span
  `StatusCode` and a message (a message only for codes outside 100–599).
  Smaller helpers: `method_attribute`, `scheme_attribute`, `server_client_ip`,
  `required_http_port`, `first_host_port`.
- **HTTP server attributes** (`otelkit.httpserver`): `server_request` and
  `server_request_metrics` return attributes for a request received by a
  server, given the primary server name or `""` to use the request's Host.
  `method_metric` maps unknown methods to `"_OTHER"`.
- **gRPC helpers**:
  - `parse_full_method` (`otelkit.parse`) turns `/package.Service/Method` into
    a span name and `rpc.service` / `rpc.method` attributes.
  - `Role`, `InterceptorType` and `InterceptorInfo` (`otelkit.role`).
  - `GrpcCode` and `server_status(code, message)` (`otelkit.grpcstatus`) map a
    gRPC status code to a span status as seen by a server.
  - `MetadataCarrier` (`otelkit.metadata`) gets, sets and lists propagation
    headers in a metadata mapping of lower-case keys to lists of values.
- **Console logging** (`otelkit.console`): `ConsoleFormatter` writes
  tab-separated lines with a coloured timestamp, level and (with
  `show_caller=True`) caller, followed by the message and, if the record has a
  `fields` attribute, those fields as JSON. `color_level`, `color_time` and
  `color_caller` do the colouring. `init_logger(service_name)` sets up a
  debug-level logger of that name writing to standard output.
- **Log fields** (`otelkit.fields`): `Field`, `get_caller` and
  `span_attributes`, which produce the `traceID`, `spanID`, `caller` and
  `funcName` attributes followed by one string attribute per field.

## Installing

```
pip install .
```

## Examples

```python
from otelkit.netconv import split_host_port
from otelkit.parse import parse_full_method
from otelkit.httpconv import Request, client_request, server_status

split_host_port("[fe80::1]:8080")        # ("fe80::1", 8080)
split_host_port("127.0.0.1")             # ("127.0.0.1", -1)

name, attrs = parse_full_method("/helloworld.Greeter/SayHello")
# name == "helloworld.Greeter/SayHello"

code, message = server_status(503)       # StatusCode.ERROR, ""

attrs = client_request(Request(method="GET", url="http://127.0.0.1:8080/resource"))
```

```python
from otelkit.console import init_logger

logger = init_logger("my-service")
logger.info("service started", extra={"fields": {"port": 8080}})
```

## What it does not do

This package builds attributes and status values; it does not record or send
them. There are no tracer, meter or logger providers, no exporters or
collector connection, and no middleware for HTTP frameworks or gRPC servers
and clients: you pass the attributes to whatever tracing library you use.
Logging goes to the console only.

## Running the tests

```
pip install .[test]
pytest
```