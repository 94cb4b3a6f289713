from colmeta.adapter.cache.fs import *
from colmeta.adapter.cache.strategy import *
