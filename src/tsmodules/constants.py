"""Well-known file names and alias table constants."""

TS_CONFIG_NAME = "tsconfig.json"
JS_CONFIG_NAME = "jsconfig.json"
SETTINGS_FILE_NAME = "tsmodules.toml"

SRC_DIR_NAME = "src"
NODE_MODULES_DIR_NAME = "node_modules"

# Suffix stripped from `paths` keys and targets ("components/*" -> "components")
WILDCARD_SUFFIX = "/*"

# Jest moduleNameMapper entry used when baseUrl points at the project root
JEST_SRC_PATTERN = "^src/(.*)$"
JEST_SRC_TEMPLATE = "<rootDir>/src/$1"
