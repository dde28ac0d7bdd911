"""apiwrap -- typed async SDKs for a handful of third-party REST APIs.

Each vendor package (:mod:`apiwrap.rippling`, :mod:`apiwrap.remote`,
:mod:`apiwrap.vercel`, :mod:`apiwrap.discourse`, :mod:`apiwrap.commonroom`)
exposes a ``Client`` with one accessor per API resource. Resource methods
build a request, attach auth, send it through :class:`~apiwrap.client.AsyncClient`
and validate the JSON body into Pydantic models.

List endpoints that page their results also offer a ``*_stream`` variant
returning an :class:`~apiwrap.pagination.AsyncPaginator`, which walks every
page lazily::

    from apiwrap.rippling import Client

    async with Client.new_from_env() as client:
        async for worker in client.workers().list_stream():
            print(worker.id)

Modules:
    pagination: Page contract and the paginator state machine.
    client: httpx-backed async client (auth, retry, error mapping).
    exceptions: Error taxonomy with exit-code mapping.
    types: Shared field types (base64, phone numbers) and the model base.
    config: XDG configuration and per-vendor profile resolution.
    output: stdout/stderr formatting used by the CLI.
    app: Typer CLI entry point.
"""

__version__ = "0.1.7"
