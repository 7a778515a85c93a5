import asyncio
from typing import Any, List, Set


class TaskTracker:
    """Keeps fire-and-forget tasks alive until they finish."""

    def __init__(self):
        self.tasks: Set[asyncio.Task] = set()

    def start(self, coro, name: str) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self.tasks.add(task)
        task.add_done_callback(self.tasks.discard)
        return task

    async def drain(self) -> List[Any]:
        if not self.tasks:
            return []
        return list(await asyncio.gather(*list(self.tasks)))
