from colmeta import data
from colmeta.adapter.cache.fs import FsCache

__all__ = ("create",)


def create(*, config: data.Config) -> data.Cache | data.Error:
    if config.cache_file.is_dir():
        return data.Error.new(
            f"The cache-file specified, {config.cache_file!s}, is a directory.",
            cache_file=config.cache_file,
        )

    return FsCache(cache_file=config.cache_file)
