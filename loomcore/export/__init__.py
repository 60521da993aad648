"""File formats for entry export and import, chosen by file extension."""