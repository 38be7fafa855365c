"""Major modes provided by pydismode"""
