# spsmonitor

spsmonitor gathers the state of a service provider system and serves it as a
single JSON document over HTTP. It reads from two kinds of source.

- **Local data files** in the configured data directory: `sms.data`,
  `voice.data`, `email.data` and `billing.data`.
- **A simulator API**, which serves JSON arrays at `/mms`, `/support` and
  `/accendent`.

Records that fail validation are dropped without an error.

## Installation

```
pip install .
```

Python 3.11 or later is required. The only dependency is PyYAML.

## Configuration

At startup the `spsmonitor` command looks in the `configs` directory under the
working directory. It reads the first of these files that exists:
`config.json`, `config.toml`, `config.yaml`, `config.yml`. Keys are matched
without regard to case. If no file can be loaded, the command logs
"Configuration file not loaded" and every setting is left empty.

```yaml
server:
  addr: localhost
  port: "8282"
simulator:
  addr: localhost
  port: "8383"
data:
  path: ./data
```

`load_settings(directory)` in `spsmonitor.config` returns these values as a
`Settings` object. `Settings.simulator_url()` returns `host:port` for the
simulator.

## Running

```
spsmonitor --mode server --addr localhost --port 8282
```

Each option also accepts a single dash: `-mode`, `-addr` and `-port`. The
`--addr` and `--port` options default to `server.addr` and `server.port` from
the configuration. `--mode` defaults to `server`. An empty port lets the
system pick a free one. If the server cannot bind, it logs the error and exits
with status 1.

The server answers only `GET /`. Any other path returns 404. Any other method
on `/` returns 405. Each request collects every source afresh and returns
this document:

```json
{"status": true,
 "data": {"sms": [...], "mms": [...], "voice_call": [...], "email": {...},
          "billing": {...}, "support": [load, wait], "incident": [...]},
 "error": ""}
```

If a data file cannot be read, or the MMS or support request fails:

- `status` is `false`;
- `error` holds the message;
- every list and map in `data` is `null`;
- every billing flag is `false`.

A failed incident request does not count as a failure; it produces an empty
incident list. An endpoint that answers with a status other than 200 is
treated as an empty array.

## What is reported

- **sms**: lines of the form `country;bandwidth;response_time;provider`.
  Fields after the fourth are ignored.
  - The country must be a known ISO 3166-1 alpha-2 code.
  - The bandwidth must be an integer from 0 to 100.
  - The response time must be an integer of 0 or more.
  - The provider must be one of Topolo, Rond or Kildy.

  The report holds two lists. Both give full country names. The first is
  sorted by provider, the second by country.
- **mms**: JSON objects with `country`, `provider`, `bandwidth` and
  `response_time`, checked by the same rules as SMS. They are reported in the
  same two lists.
- **voice_call**: lines of eight fields, in this order:
  `country;load;response_time;provider;stability;ttfb;purity;median`.
  - The load must be an integer from 0 to 100.
  - The provider must be one of TransparentCalls, E-Voice or JustPhone.
  - The stability is a single-precision number.
  - The remaining numeric fields are integers.

  The reported `ttfb` is taken from the response-time column.
- **email**: lines of the form `country;provider;delivery_time`. The delivery
  time must be a positive integer. For each country with at least three
  records, the report gives two lists: the three slowest providers, then the
  three fastest. Both lists are in ascending order of delivery time.
- **billing**: a six-character mask. The characters map to flags from right to
  left: `create_customer`, `purchase`, `payout`, `recurring`,
  `fraud_control`, `checkout_page`. A `1` sets a flag. A mask of any other
  length clears every flag.
- **support**: the report gives `[load, wait]`.
  - `load` comes from the total number of active tickets: 1 below 9, 2 for 9
    to 16, and 3 above 16.
  - `wait` is the total × 60 / 18, truncated.

  With no support records the list is empty.
- **incident**: incidents whose status is `active` or `closed`, sorted by
  status.

## Library use

```python
from spsmonitor.config import load_settings
from spsmonitor.result import collect_results

settings = load_settings("configs")
result = collect_results("http://" + settings.simulator_url(), settings.data_path)
print(result.to_dict())
```

Each source can also be read on its own:

- `spsmonitor.sms.read_sms` and `parse_sms`
- `spsmonitor.voice.read_voice` and `parse_voice`
- `spsmonitor.mail.read_email`, `parse_email` and `slow_fast_providers`
- `spsmonitor.billing.read_billing` and `parse_billing`
- `spsmonitor.mms.fetch_mms` and `filter_mms`
- `spsmonitor.support.fetch_support` and `parse_support`
- `spsmonitor.incident.fetch_incidents` and `filter_incidents`

The parsing functions return `None` for an invalid line. Fetching raises
`spsmonitor.net.FetchError` if a request or its JSON fails.

To serve the report from your own code, use `spsmonitor.server.make_server`
or `run_server`. To build one response body without a server, use
`build_response(settings)`.

## Not included

The package has no simulator of its own. It does not serve the `/mms`,
`/support` or `/accendent` endpoints, and it does not generate the data files.
Running `spsmonitor --mode simulator` logs that simulator mode is not
available and exits with status 1.