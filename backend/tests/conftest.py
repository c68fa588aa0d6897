"""Root conftest — shared test configuration."""

import os

# Fake credentials so boto3 never reaches the default chain (moto intercepts all calls)
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ["AWS_SECURITY_TOKEN"] = "testing"
os.environ["AWS_SESSION_TOKEN"] = "testing"
os.environ["AWS_DEFAULT_REGION"] = "ap-northeast-1"
os.environ.setdefault("LOG_FORMAT", "text")
