import pytest

from casewright import naming


def test_shortcuts():
    assert naming.to_kebab("firstName") == "first-name"
    assert naming.to_camel("hello_world") == "helloWorld"
    assert naming.to_pascal("hello_world") == "HelloWorld"
    assert naming.to_snake("helloWorld") == "hello_world"
    assert naming.to_dot("hello world") == "hello.world"
    assert naming.to_constant("helloWorld") == "HELLO_WORLD"
    assert naming.to_train("hello world") == "Hello-World"
    assert naming.to_path("helloWorld") == "hello/world"
    assert naming.to_title("hello-world") == "Hello World"


@pytest.mark.parametrize("fn", [
    naming.to_kebab, naming.to_camel, naming.to_pascal, naming.to_snake, naming.to_dot,
    naming.to_constant, naming.to_train, naming.to_path, naming.to_title,
])
def test_shortcuts_are_lenient(fn):
    assert fn(None) == ""
    assert fn("  ") == ""


def test_camel_to_snake():
    assert naming.camel_to_snake("postComments") == "post_comments"
    assert naming.camel_to_snake("PostComments") == "post_comments"
    assert naming.camel_to_snake("post_comments") == "post_comments"
    assert naming.camel_to_snake("HTTPServer") == "httpserver"


def test_snake_to_camel():
    assert naming.snake_to_camel("post_comments") == "postComments"
    assert naming.snake_to_camel("post_comments", upper_first=True) == "PostComments"
    assert naming.snake_to_camel("__post__comments__") == "postComments"
