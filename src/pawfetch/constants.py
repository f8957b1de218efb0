APP_NAME = "pawfetch"
ENV_PREFIX = "PAWFETCH_CONFIG__"
