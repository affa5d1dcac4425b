from handlers import CommandHandler


class DeleteUserHandler(CommandHandler):
    def handle(self) -> str:
        return "user deleted"
