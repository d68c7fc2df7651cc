"""
Shared thread pool for running blocking vendor calls.

The MCP servers are async, but the vendor client is built on ``requests``.
Every blocking call goes through ``run_in_thread`` so a slow upload or a
large download never stalls the event loop::

    from mcp_servers.core.thread_pool import run_in_thread
    result = await run_in_thread(client.post, "/v1/t2a_v2", payload)

Owning the executor (instead of ``asyncio.to_thread``) keeps it alive when
the default loop executor is shut down by the transport on exit.
"""

import asyncio
import concurrent.futures
import functools

# Shared executor for the whole process.
_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=8, thread_name_prefix="mcp-worker"
)


async def run_in_thread(func, *args, **kwargs):
    """Run *func(*args, **kwargs)* in the shared thread pool."""
    loop = asyncio.get_running_loop()
    call = functools.partial(func, *args, **kwargs)
    return await loop.run_in_executor(_executor, call)
