from colmeta.adapter import cache, column_json, config, log
