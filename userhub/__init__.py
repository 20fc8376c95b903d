"""userhub: async CRUD API for the User resource."""
