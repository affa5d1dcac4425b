from handlers import CommandHandler


class CreateUserHandler(CommandHandler):
    def handle(self) -> str:
        return "user created"
