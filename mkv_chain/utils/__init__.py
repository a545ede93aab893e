# mkv_chain/utils/__init__.py
