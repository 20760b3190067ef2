# learning_dictionary/utils/__init__.py
# persistence, config, logging and small runtime helpers
