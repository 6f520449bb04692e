# wrapkit

A small circuit breaker for Python with no dependencies.

If a call fails a set number of times in a row, the breaker *opens* for a
set interval. While it is open, calls are refused at once with
`CircuitOpenError`, and the wrapped code does not run. After the interval
has passed, the next call goes through:

- If it succeeds, the failure count is reset and the breaker closes.
- If it fails, the breaker opens again at once.

The breaker is thread-safe. It measures time with a monotonic clock.

## Installation

```
pip install wrapkit
```

## Guarding individual calls

```python
from wrapkit.circuitbreaker import CircuitBreaker, CircuitOpenError

# Open after 3 consecutive failures and stay open for 5 seconds.
breaker = CircuitBreaker(3, 5.0)

try:
    result = breaker.call(fetch_report, "daily", retries=0)
except CircuitOpenError:
    result = cached_report()

if breaker.is_open():
    print("backing off")
```

`call(func, *args, **kwargs)` calls `func` with the given arguments and returns its result. Any exception that `func` raises is raised again to the caller after the breaker has counted it. Only exceptions derived from `Exception` are counted.

The message of `CircuitOpenError` is `"<name>: circuit is open"`. For a plain `CircuitBreaker` this is `"CircuitBreaker: circuit is open"`.

### Ignored errors

Any extra positional arguments to `CircuitBreaker` are errors to ignore. Each one can be either:

- an exception class, which matches instances of that class and its subclasses, or
- a particular exception instance, which matches only that exact object.

```python
NOT_FOUND = LookupError("not found")
breaker = CircuitBreaker(3, 5.0, KeyError, NOT_FOUND)
```

An ignored error resets the failure count and closes the breaker, just as a success does. It is still raised to the caller.

## Wrapping a whole object

`CircuitBreakerProxy(base, consecutive_errors, open_interval, *ignored)` wraps an object. Every callable attribute of `base` that you reach through the proxy goes through one shared breaker. Other attributes are returned unchanged.

```python
from wrapkit.circuitbreaker import CircuitBreakerProxy

client = CircuitBreakerProxy(ApiClient(), 2, 1.0)
client.get_user("alice")   # guarded
client.timeout             # plain attribute access
```

When the proxy refuses a call, the error message names the wrapped type. In the example above it is `"ApiClientWithCircuitBreaker: circuit is open"`.

## Limitations

- The only states are closed and open. There is no separate half-open state and no limit on trial calls.
- There are no metrics, no callbacks and no event hooks.
- Async functions are not awaited. Calling one through the breaker only creates the coroutine, so only errors raised while creating it are counted.