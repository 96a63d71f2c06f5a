# Add imports
from modreg import create

# Create a registry
registry = create()


class Greeting:
    def __init__(self, message_start: str, message_end: str):
        self.message_start = message_start
        self.message_end = message_end


class MessageBuilder:
    def __init__(self, greeting: Greeting, salutation: str):
        self.greeting = greeting
        self.salutation = salutation

    def get_message(self):
        return f"{self.salutation}! {self.greeting.message_start} {self.greeting.message_end}."


# Define modules with their dependencies. Plain values are modules too.
registry.define("salutation", factory="Bonjour")
registry.define(
    "greeting", factory=lambda: Greeting("I was initialized", "with dependency injection")
)
registry.define("message_builder", ["greeting", "salutation"], MessageBuilder)

# Instantiate a module through the registry
message_builder = registry.require("message_builder")

# Use the module
message = message_builder.get_message()
print(message)

assert message == "Bonjour! I was initialized with dependency injection."
# You should see this string as the output of your script

# Modules are created once
assert registry.require("message_builder") is message_builder

print(registry.log())
# * salutation -> [  ]
# * greeting -> [  ]
# * message_builder -> [ greeting, salutation ]
