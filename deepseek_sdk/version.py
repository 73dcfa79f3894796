NAME = "deepseek-sdk"
VERSION = "0.1.0"
