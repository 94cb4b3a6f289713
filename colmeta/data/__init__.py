from colmeta.data.jdbc_type import *
from colmeta.data.error import *
from colmeta.data.column import *
from colmeta.data.column_editor import *
from colmeta.data.cache import *
from colmeta.data.config import *
