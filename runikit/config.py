"""Build-time configuration with its default values."""

from dataclasses import dataclass
import math

USIZE_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class Config:
    """Configuration of the kernel libraries; sizes are in bytes."""

    heap_size: int = 16 << 20
    # boot
    max_args_cnt: int = 64
    # scheduler
    stack_size_page_order: int = 4
    memory_size_limit: int = USIZE_MAX
    open_files_limit: int = 1024
    pipe_size_limit: int = 4096
    cpu_time_limit: float = math.inf
    # platform
    lcpu_maxcount: int = 8
    main_stack_size: int = 65536
    page_size: int = 4096
    stack_size_scale: int = 1

    def stack_size(self) -> int:
        """Size of a thread stack: ``2**stack_size_page_order`` pages."""
        return self.page_size * (1 << self.stack_size_page_order)


def default_config(debug: bool = False) -> Config:
    """The default configuration; debug builds need ten times the stack."""
    return Config(stack_size_scale=10 if debug else 1)