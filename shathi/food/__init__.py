# -*- coding: utf-8 -*-
"""Food domain (meal logging + daily carbohydrate summary)."""
