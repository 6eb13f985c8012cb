"""Constants used throughout privateerr-ctl."""


# Operation names
BUILD_DEPENDS = "build-depends"
PIA_CREDS = "pia-creds"
DOWN = "down"
CLEAN = "clean"
BUILD = "build"
UP = "up"
LOGS = "logs"
HELP = "help"
RUN = "run"

# Docker Compose defaults
COMPOSE_COMMAND = "docker-compose"
DEFAULT_SERVICE_NAME = "privateerr"
DEFAULT_DOWN_TIMEOUT = 30
DEFAULT_DOWN_OPTIONS = "--timeout {timeout} --rmi all --volumes"
DEFAULT_BUILD_OPTIONS = "--pull --no-cache"
DEFAULT_UP_OPTIONS = "--build --force-recreate --pull always"
DEFAULT_LOGS_OPTIONS = "--follow"

# Executables that must be on PATH before compose is invoked
DEPENDENCIES = ["docker", "docker-compose"]

# Credential variables, checked in this order
PIA_USER_VAR = "PIA_USER"
PIA_PASS_VAR = "PIA_PASS"
CREDENTIAL_VARS = [PIA_USER_VAR, PIA_PASS_VAR]

# Dockerfile location relative to the project directory
DOCKERFILE_PATH = "docker/Dockerfile"
FROM_MARKER = "FROM"

# Exit status used when a streaming command is interrupted
INTERRUPTED_EXIT_CODE = 130
