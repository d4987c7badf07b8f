# Having this makes debugger a little happier
