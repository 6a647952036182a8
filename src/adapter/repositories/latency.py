import asyncio


class SimulatedLatency:
    """Artificial delay applied before each repository read or write"""

    def __init__(self, read_ms: int = 0, write_ms: int = 0):
        self.read_ms = read_ms
        self.write_ms = write_ms

    async def read(self):
        if self.read_ms > 0:
            await asyncio.sleep(self.read_ms / 1000)

    async def write(self):
        if self.write_ms > 0:
            await asyncio.sleep(self.write_ms / 1000)
