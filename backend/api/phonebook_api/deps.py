from fastapi import Request

from phonebook_core.infra.memory.contacts_repo import ContactsRepoMemory


def get_contacts_repo(request: Request) -> ContactsRepoMemory:
    return request.app.state.contacts_repo
