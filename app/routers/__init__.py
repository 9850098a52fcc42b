"""
Routers module - API endpoint handlers organized by feature.

Each router handles a specific domain of the API:
- version: Build information
- auth: Google OAuth sign-in workflow
- userinfo: Profile of the signed-in user
- notes: Note CRUD in the Drive app-data folder
- sections: Section CRUD inside a note
"""
