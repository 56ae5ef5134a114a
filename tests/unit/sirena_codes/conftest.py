from dataclasses import dataclass

import pytest

from sirena_codes.codes.domain.factory import CodeFactory


@dataclass
class FakeLambdaContext:
    function_name: str = "code-validation"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:code-validation"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def factory():
    """全テスト共通の CodeFactory フィクスチャ"""
    return CodeFactory()


@pytest.fixture
def lambda_context():
    """Lambda コンテキストのフェイク"""
    return FakeLambdaContext()
