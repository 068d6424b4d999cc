"""Greetings: the reference walkthrough app.

Demonstrates query parameters, route parameters, registration order
winning over specificity, a validation handler that routes to the
shared error channel, and the not-found fallback.

Try:
    wren request examples.greetings.app /hello?name=Danni
    wren request examples.greetings.app /say/goodbye
    wren request examples.greetings.app /states/California
    wren routes examples.greetings.app
"""

import logging

from wren import App

logger = logging.getLogger("greetings")

app = App()


def log_request(ctx, next):
    logger.info("A request is being made to %s", ctx.path)
    return next()


def say_hello(ctx, next):
    name = ctx.query.get("name")
    return f"Hello, {name}!" if name else "Hello!"


def say_something(ctx, next):
    greeting = ctx.params["greeting"]
    name = ctx.query.get("name")
    return f"{greeting}, {name}!" if name else f"{greeting}!"


def say_goodbye(ctx, next):
    # Never reached: /say/:greeting is registered first and also matches
    return "Sorry to see you go!"


def check_abbreviation_length(ctx, next):
    if len(ctx.params["abbreviation"]) != 2:
        return next("State abbreviation is invalid.")
    return next()


def describe_state(ctx, next):
    return f"{ctx.params['abbreviation']} is a nice state, I'd like to visit."


def plan_trip(ctx, next):
    return f"Enjoy your trip to {ctx.params['abbreviation']}!"


app.use(log_request)

app.get("/hello", say_hello)
app.get("/say/:greeting", say_something)
app.get("/say/goodbye", say_goodbye)
app.get("/states/:abbreviation", check_abbreviation_length, describe_state)
app.get("/travel/:abbreviation", check_abbreviation_length, plan_trip)


@app.fallback
def not_found(ctx):
    return f"The route {ctx.path} does not exist!"


@app.error
def on_error(value, ctx):
    return str(value)
